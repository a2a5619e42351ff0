"""
RowOutcome model representing the result of validating one payload row (ephemeral).
"""

from pydantic import BaseModel, model_validator

from .schedule_record import ScheduleRecord


class RowOutcome(BaseModel):
    """
    Outcome of validating a single row: a record or a diagnostic, never both.

    Attributes:
        line_number: 1-based line of the row in the payload
        record: The record built from the row, when it passed
        failed_rule: Rule type that rejected the row, when it failed
        diagnostic: Human-readable reason the row was rejected
    """

    line_number: int
    record: ScheduleRecord | None = None
    failed_rule: str | None = None
    diagnostic: str | None = None

    @model_validator(mode="after")
    def check_exactly_one(self) -> "RowOutcome":
        if (self.record is None) == (self.diagnostic is None):
            raise ValueError("exactly one of record or diagnostic must be set")
        return self

    @property
    def passed(self) -> bool:
        return self.record is not None
