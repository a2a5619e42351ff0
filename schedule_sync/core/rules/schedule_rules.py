"""
Column layout and validation rules of the schedule payload.
"""

from typing import Any

from schedule_sync.core.models import ScheduleStatus

# Payload column order; names match the ScheduleRecord aliases.
SCHEDULE_COLUMNS = ["ownerId", "date", "startTime", "endTime", "activity", "status"]

REQUIRED_COLUMNS = ["ownerId", "date", "startTime", "endTime", "activity"]


def default_rules() -> list[dict[str, Any]]:
    """
    Rules applied to every row, in evaluation order.

    Arity first, then required fields, then the status enum. The first
    failing rule decides the row's diagnostic.
    """
    rules: list[dict[str, Any]] = [
        {
            "rule_name": "column_count",
            "rule_type": "column_count",
            "field_name": "*",
            "parameters": {"expected": len(SCHEDULE_COLUMNS)},
        }
    ]
    rules.extend(
        {
            "rule_name": f"require_{column}",
            "rule_type": "required_field",
            "field_name": column,
        }
        for column in REQUIRED_COLUMNS
    )
    rules.append(
        {
            "rule_name": "status_enum",
            "rule_type": "enum",
            "field_name": "status",
            "parameters": {"enum": ScheduleStatus},
        }
    )
    return rules
