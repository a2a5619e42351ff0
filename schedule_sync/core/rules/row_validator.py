"""
Row validator turning tokenized payload rows into schedule records.

The validator loads rule configurations, applies them to a row in order
and stops at the first failure, producing either a ScheduleRecord or a
diagnostic line for the import report.
"""

from typing import Any, Sequence

from schedule_sync.core.models import RowOutcome, ScheduleRecord, ScheduleStatus
from schedule_sync.core.rules.schedule_rules import SCHEDULE_COLUMNS, default_rules
from schedule_sync.core.validators import (
    BaseValidator,
    ColumnCountValidator,
    EnumValidator,
    RequiredFieldValidator,
    ValidationError,
)
from schedule_sync.observability.logger import get_logger

logger = get_logger(__name__)

# Field name used by rules that look at the whole token list
WHOLE_ROW = "*"


def format_diagnostic(line_number: int, message: str) -> str:
    return f"Line {line_number}: {message}"


class RowValidator:
    """
    Validates one payload row at a time.

    Rules run in configuration order and short-circuit: a row that fails
    the column count is never checked for missing fields, and so on.
    validate_row() never raises for bad row content.
    """

    VALIDATOR_REGISTRY = {
        "column_count": ColumnCountValidator,
        "required_field": RequiredFieldValidator,
        "enum": EnumValidator,
    }

    def __init__(
        self,
        rules: list[dict[str, Any]] | None = None,
        columns: Sequence[str] = SCHEDULE_COLUMNS,
    ):
        """
        Initialize the row validator.

        Args:
            rules: Rule configurations, each containing:
                   - rule_name: str
                   - rule_type: str (column_count, required_field, enum)
                   - field_name: str ("*" for the whole row)
                   - parameters: Dict[str, Any] (optional)
                   - enabled: bool (default True)
                   Defaults to the schedule payload rules.
            columns: Column names, in payload order
        """
        self.rules = rules if rules is not None else default_rules()
        self.columns = list(columns)
        self.validators: list[tuple[str, BaseValidator]] = []
        self._build_validators()

    def _build_validators(self) -> None:
        """Build validator instances from rule configurations."""
        for rule in self.rules:
            if not rule.get("enabled", True):
                continue

            rule_name = rule["rule_name"]
            rule_type = rule["rule_type"]
            field_name = rule["field_name"]
            parameters = rule.get("parameters", {})

            validator_class = self.VALIDATOR_REGISTRY.get(rule_type)
            if not validator_class:
                raise ValueError(f"Unknown rule type: {rule_type}")

            try:
                validator = validator_class(field_name, parameters)
            except ValueError as e:
                raise ValueError(f"Failed to create validator for rule '{rule_name}': {e}")
            self.validators.append((rule_name, validator))

    def validate_row(self, row: tuple[int, Sequence[str]]) -> RowOutcome:
        """
        Validate one (line_number, tokens) row.

        Args:
            row: Line number and stripped tokens of a data row

        Returns:
            RowOutcome holding either the new record or the diagnostic
        """
        line_number, tokens = row
        keyed = dict(zip(self.columns, tokens))

        for rule_name, validator in self.validators:
            if validator.field_name == WHOLE_ROW:
                value: Any = list(tokens)
            else:
                value = keyed.get(validator.field_name)

            try:
                validator.validate(value, keyed)
            except ValidationError as e:
                logger.debug(
                    f"Row rejected by {rule_name}",
                    extra={"line_number": line_number, "rule": rule_name, "field": e.field_name},
                )
                return RowOutcome(
                    line_number=line_number,
                    failed_rule=validator.rule_type,
                    diagnostic=format_diagnostic(line_number, e.message),
                )

        try:
            record = self._build_record(keyed)
        except (KeyError, ValueError):
            # Only reachable with a rule set that skips the arity or enum checks
            return RowOutcome(
                line_number=line_number,
                failed_rule="record_schema",
                diagnostic=format_diagnostic(line_number, "invalid record"),
            )

        return RowOutcome(line_number=line_number, record=record)

    def validate_rows(self, rows: Sequence[tuple[int, Sequence[str]]]) -> list[RowOutcome]:
        """Validate rows in order, one outcome per row."""
        return [self.validate_row(row) for row in rows]

    def _build_record(self, keyed: dict[str, str]) -> ScheduleRecord:
        return ScheduleRecord(
            ownerId=keyed["ownerId"],
            date=keyed["date"],
            startTime=keyed["startTime"],
            endTime=keyed["endTime"],
            activity=keyed["activity"],
            status=ScheduleStatus(keyed["status"]),
        )

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule count, names and counts per type
        """
        counts: dict[str, int] = {}
        for _, validator in self.validators:
            counts[validator.rule_type] = counts.get(validator.rule_type, 0) + 1
        return {
            "total_rules": len(self.validators),
            "rule_names": [name for name, _ in self.validators],
            "rules_by_type": counts,
        }
