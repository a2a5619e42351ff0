"""
Core data models for the schedule import pipeline.

All models use Pydantic for runtime validation and type safety.
"""

from .admin_state import AdminState
from .import_report import ImportReport
from .owner import Owner
from .row_outcome import RowOutcome
from .schedule_record import ScheduleRecord, ScheduleStatus

__all__ = [
    "ScheduleStatus",
    "ScheduleRecord",
    "ImportReport",
    "Owner",
    "RowOutcome",
    "AdminState",
]
