"""
Summaries shown on the admin dashboard and the import history view.
"""

from typing import Any

from schedule_sync.core.models import ImportReport, Owner, ScheduleStatus


def summarize_owners(owners: list[Owner]) -> dict[str, Any]:
    """
    Dashboard figures for the owner collection.

    Returns:
        total_owners, total_schedules, active_schedules and the number of
        distinct departments
    """
    return {
        "total_owners": len(owners),
        "total_schedules": sum(len(owner.schedules) for owner in owners),
        "active_schedules": sum(
            1
            for owner in owners
            for record in owner.schedules
            if record.status == ScheduleStatus.ACTIVE
        ),
        "departments": len({owner.department for owner in owners}),
    }


def search_owners(owners: list[Owner], term: str) -> list[Owner]:
    """Owners whose name, email or department contains term (case-insensitive)."""
    needle = term.lower()
    return [
        owner
        for owner in owners
        if needle in owner.name.lower()
        or needle in owner.email.lower()
        or needle in owner.department.lower()
    ]


def summarize_history(history: list[ImportReport]) -> dict[str, int]:
    """Totals across all retained import reports."""
    return {
        "total_imports": len(history),
        "records_imported": sum(report.success_count for report in history),
        "total_errors": sum(report.error_count for report in history),
    }
