"""
Owner model representing a user whose schedule receives imported records.
"""

from pydantic import BaseModel, Field

from .schedule_record import ScheduleRecord


class Owner(BaseModel):
    """
    A user (or department) that owns schedule records.

    Attributes:
        id: Owner identity, matched against ScheduleRecord.owner_id
        name: Display name
        email: Contact email
        department: Department the owner belongs to
        schedules: Records owned, oldest first
    """

    id: str = Field(..., min_length=1)
    name: str = ""
    email: str = ""
    department: str = ""
    schedules: list[ScheduleRecord] = Field(default_factory=list)

    def count_by_status(self) -> dict[str, int]:
        """Number of schedules per status value."""
        counts: dict[str, int] = {}
        for record in self.schedules:
            counts[record.status.value] = counts.get(record.status.value, 0) + 1
        return counts

    class Config:
        json_schema_extra = {
            "example": {
                "id": "1",
                "name": "Juan Pérez",
                "email": "juan@empresa.com",
                "department": "Desarrollo",
                "schedules": [
                    {
                        "id": "s1",
                        "ownerId": "1",
                        "date": "2025-01-08",
                        "startTime": "09:00",
                        "endTime": "17:00",
                        "activity": "Desarrollo Frontend",
                        "status": "active"
                    }
                ]
            }
        }
