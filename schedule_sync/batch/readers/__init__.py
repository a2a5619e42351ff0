"""
Payload readers and the line parser.
"""

from .line_parser import ParsedRow, parse_lines, split_lines, tokenize
from .payload_reader import PayloadAcquisitionError, PayloadReader, read_payload

__all__ = [
    "ParsedRow",
    "parse_lines",
    "split_lines",
    "tokenize",
    "PayloadAcquisitionError",
    "PayloadReader",
    "read_payload",
]
