"""
Schedule import processing module.
"""

from .merge import apply_import, merge_report, unmatched_records
from .pipeline import ImportPipeline, build_demo_report
from .readers import PayloadAcquisitionError, PayloadReader, parse_lines
from .writers import ReportWriter, report_to_document

__all__ = [
    "ImportPipeline",
    "build_demo_report",
    "merge_report",
    "apply_import",
    "unmatched_records",
    "PayloadAcquisitionError",
    "PayloadReader",
    "parse_lines",
    "ReportWriter",
    "report_to_document",
]
