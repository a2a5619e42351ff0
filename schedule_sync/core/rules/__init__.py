"""
Row validation rules for schedule payloads.
"""

from .row_validator import RowValidator, format_diagnostic
from .schedule_rules import REQUIRED_COLUMNS, SCHEDULE_COLUMNS, default_rules

__all__ = [
    "RowValidator",
    "format_diagnostic",
    "SCHEDULE_COLUMNS",
    "REQUIRED_COLUMNS",
    "default_rules",
]
