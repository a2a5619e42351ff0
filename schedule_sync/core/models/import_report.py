"""
ImportReport model representing the immutable result of one import.
"""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from .schedule_record import ScheduleRecord


def new_report_id() -> str:
    return f"import_{uuid4().hex}"


class ImportReport(BaseModel):
    """
    Aggregate result of one import: records, diagnostics and counts.

    A report is final as soon as it is constructed. It is appended to the
    import history and kept for audit even when some of its records never
    reach an owner.

    Attributes:
        id: Opaque unique identifier
        source_name: Label of the ingested payload (usually the file name)
        imported_at: When the payload was processed (UTC)
        records: Records produced, in row order
        diagnostics: One message per rejected row, in row order
        success_count: Number of rows that became records
        total_rows: Number of data rows seen (successes + failures)
    """

    id: str = Field(default_factory=new_report_id, min_length=1)
    source_name: str = Field(..., alias="sourceName")
    imported_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="importedAt"
    )
    records: tuple[ScheduleRecord, ...] = ()
    diagnostics: tuple[str, ...] = ()
    success_count: int = Field(..., ge=0, alias="successCount")
    total_rows: int = Field(..., ge=0, alias="totalRows")

    @field_validator("success_count")
    @classmethod
    def check_success_count(cls, v, info):
        """success_count must equal the number of records."""
        records = info.data.get("records", ())
        if v != len(records):
            raise ValueError(
                f"success_count ({v}) must match number of records ({len(records)})"
            )
        return v

    @field_validator("total_rows")
    @classmethod
    def check_total_rows(cls, v, info):
        """total_rows must equal successes plus diagnostics."""
        success_count = info.data.get("success_count")
        diagnostics = info.data.get("diagnostics", ())
        if success_count is not None and v != success_count + len(diagnostics):
            raise ValueError(
                f"total_rows ({v}) must equal success_count ({success_count}) "
                f"plus diagnostics ({len(diagnostics)})"
            )
        return v

    @property
    def error_count(self) -> int:
        return len(self.diagnostics)

    @classmethod
    def from_outcomes(
        cls,
        source_name: str,
        records: list[ScheduleRecord],
        diagnostics: list[str],
    ) -> "ImportReport":
        """Build a report whose counts are derived from the partitions."""
        return cls(
            source_name=source_name,
            records=tuple(records),
            diagnostics=tuple(diagnostics),
            success_count=len(records),
            total_rows=len(records) + len(diagnostics),
        )

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "import_0b9e4f2c7a1d4e3b9c8f6a5d4e3c2b1a",
                "sourceName": "horarios.csv",
                "importedAt": "2025-01-10T12:00:00Z",
                "records": [
                    {
                        "id": "imported_5f0c6a1e9b7d4c2a8e3f1b6d7c9a0e2f",
                        "ownerId": "1",
                        "date": "2025-01-10",
                        "startTime": "08:00",
                        "endTime": "16:00",
                        "activity": "Backend",
                        "status": "active"
                    }
                ],
                "diagnostics": ['Line 3: invalid status "unknown"'],
                "successCount": 1,
                "totalRows": 2
            }
        }
