"""
ColumnCountValidator - ensures a row has exactly the expected number of tokens.
"""

from typing import Any

from .base_validator import BaseValidator, ValidationError


class ColumnCountValidator(BaseValidator):
    """
    Validates the arity of a tokenized row.

    Parameters:
    - expected: Number of tokens a row must have

    The value passed to validate() is the token list itself, since the
    row cannot be keyed by column name until its arity is known.
    """

    def __init__(self, field_name: str = "*", parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        expected = self.parameters.get("expected")
        if not isinstance(expected, int) or expected < 1:
            raise ValueError("ColumnCountValidator requires a positive integer 'expected' parameter")
        self.expected = expected

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate that the row has the expected number of tokens.

        Args:
            value: The row's token list
            record: Unused; the row is not keyed yet

        Raises:
            ValidationError: If the token count differs from the expected one
        """
        if len(value) != self.expected:
            raise ValidationError(
                rule_name="column_count",
                field_name=self.field_name,
                message=f"wrong column count, expected {self.expected}"
            )

    @property
    def rule_type(self) -> str:
        return "column_count"
