"""
ScheduleRecord model representing one validated schedule entry.
"""

from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator


class ScheduleStatus(str, Enum):
    """Closed set of schedule states accepted by the import."""

    ACTIVE = "active"
    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


def new_record_id() -> str:
    """Generate an opaque id for an imported record."""
    return f"imported_{uuid4().hex}"


class ScheduleRecord(BaseModel):
    """
    A validated schedule entry owned by a user.

    Records are created by the row validator (or by the demo record set)
    and never change afterwards.

    Attributes:
        id: Opaque unique identifier, generated at import time
        owner_id: Id of the owning user (not checked for existence)
        date: Calendar date, kept as given
        start_time: Start time of day, kept as given
        end_time: End time of day, kept as given
        activity: Free-text label
        status: One of active, pending, completed
    """

    id: str = Field(default_factory=new_record_id, min_length=1)
    owner_id: str = Field(..., alias="ownerId")
    date: str
    start_time: str = Field(..., alias="startTime")
    end_time: str = Field(..., alias="endTime")
    activity: str
    status: ScheduleStatus

    @field_validator("owner_id", "date", "start_time", "end_time", "activity")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        """Required text fields must contain something besides whitespace."""
        if not v.strip():
            raise ValueError("field must not be empty")
        return v

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "imported_5f0c6a1e9b7d4c2a8e3f1b6d7c9a0e2f",
                "ownerId": "1",
                "date": "2025-01-10",
                "startTime": "08:00",
                "endTime": "16:00",
                "activity": "Desarrollo Backend",
                "status": "active"
            }
        }
