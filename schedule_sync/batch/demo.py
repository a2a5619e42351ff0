"""
Demo record set used by the synthetic import path.
"""

from schedule_sync.core.models import ScheduleRecord, ScheduleStatus

DEMO_SOURCE_NAME = "horarios_demo.csv"


def demo_records() -> list[ScheduleRecord]:
    """Three already-valid records for owners 1, 2 and 3."""
    return [
        ScheduleRecord(
            id="demo_1",
            ownerId="1",
            date="2025-01-10",
            startTime="08:00",
            endTime="16:00",
            activity="Desarrollo Backend",
            status=ScheduleStatus.ACTIVE,
        ),
        ScheduleRecord(
            id="demo_2",
            ownerId="2",
            date="2025-01-10",
            startTime="09:00",
            endTime="17:00",
            activity="Revisión de diseños",
            status=ScheduleStatus.PENDING,
        ),
        ScheduleRecord(
            id="demo_3",
            ownerId="3",
            date="2025-01-10",
            startTime="10:00",
            endTime="18:00",
            activity="Análisis de mercado",
            status=ScheduleStatus.ACTIVE,
        ),
    ]
