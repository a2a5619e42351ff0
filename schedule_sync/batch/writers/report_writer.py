"""
Import report export.

Writes an ImportReport as a JSON document for audit. The export only reads
the report; it never changes counts or records.
"""

import json
import time
from pathlib import Path
from typing import Any

from schedule_sync.core.models import ImportReport
from schedule_sync.observability.logger import get_logger

logger = get_logger(__name__)


def report_to_document(report: ImportReport) -> dict[str, Any]:
    """
    Convert a report into its export document.

    Args:
        report: The report to export

    Returns:
        JSON-serializable dictionary with summary, records and diagnostics
    """
    return {
        "id": report.id,
        "sourceName": report.source_name,
        "importedAt": report.imported_at.isoformat(),
        "summary": {
            "totalRows": report.total_rows,
            "successCount": report.success_count,
            "errorCount": report.error_count,
        },
        "records": [
            record.model_dump(mode="json", by_alias=True) for record in report.records
        ],
        "diagnostics": list(report.diagnostics),
    }


def export_file_name(report: ImportReport, timestamp_ms: int | None = None) -> str:
    """File name of an exported report: reporte_<source>_<epoch-ms>.json"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    source = Path(report.source_name.replace("\\", "/")).name
    return f"reporte_{source}_{timestamp_ms}.json"


class ReportWriter:
    """
    Writes import reports to a directory as JSON files.
    """

    def __init__(self, output_dir: str | Path, indent: int = 2):
        """
        Initialize report writer.

        Args:
            output_dir: Directory receiving the exports (created if missing)
            indent: JSON indentation
        """
        self.output_dir = Path(output_dir)
        self.indent = indent

    def write(self, report: ImportReport) -> Path:
        """
        Export one report.

        Args:
            report: The report to export

        Returns:
            Path of the written file
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / export_file_name(report)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(report_to_document(report), f, indent=self.indent, ensure_ascii=False)

        logger.info(f"Exported import report to {path}", extra={"report_id": report.id})
        return path
