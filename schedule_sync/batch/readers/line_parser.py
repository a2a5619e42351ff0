"""
Line parser for flat comma-delimited schedule payloads.

There is no quoting or escaping: a delimiter inside a value splits the
value, and the row then fails the column count check downstream.
"""

import re
from typing import NamedTuple

DEFAULT_DELIMITER = ","

LINE_BREAK = re.compile(r"\r\n|\r|\n")


class ParsedRow(NamedTuple):
    """A data row and the line it came from."""

    line_number: int
    tokens: list[str]


def split_lines(text: str) -> list[str]:
    """Split text on \\n, \\r\\n or \\r, dropping empty and whitespace-only lines."""
    return [line for line in LINE_BREAK.split(text) if line.strip()]


def tokenize(line: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    """Split one line on the delimiter and strip each token."""
    return [token.strip() for token in line.split(delimiter)]


def parse_lines(text: str, delimiter: str = DEFAULT_DELIMITER) -> list[ParsedRow]:
    """
    Turn a payload into numbered token rows.

    Blank lines are dropped before numbering. The first remaining line is
    the header: it is not returned but is line 1, so the first data row
    is line 2.

    Args:
        text: Raw payload text
        delimiter: Field delimiter

    Returns:
        Data rows in payload order
    """
    lines = split_lines(text)
    return [
        ParsedRow(line_number=index + 1, tokens=tokenize(line, delimiter))
        for index, line in enumerate(lines)
        if index > 0
    ]
