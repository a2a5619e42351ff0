"""
Batch writers for import results.
"""

from .report_writer import ReportWriter, export_file_name, report_to_document

__all__ = [
    "ReportWriter",
    "export_file_name",
    "report_to_document",
]
