"""
RequiredFieldValidator - ensures a field is present and not empty.
"""

from typing import Any

from .base_validator import BaseValidator, ValidationError

MISSING_FIELD_MESSAGE = "missing required field(s)"


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a required field is present and not empty.

    Fails if:
    - Field is missing from the row
    - Field value is None
    - Field value is empty or whitespace-only

    All failures share one message; the offending column is carried in
    ValidationError.field_name.
    """

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate that the field is present and not empty.

        Args:
            value: The field value to validate
            record: The whole row keyed by column name

        Raises:
            ValidationError: If field is missing, None, or empty
        """
        if self.field_name not in record or value is None:
            raise ValidationError(
                rule_name="required_field",
                field_name=self.field_name,
                message=MISSING_FIELD_MESSAGE
            )

        if isinstance(value, str) and value.strip() == "":
            raise ValidationError(
                rule_name="required_field",
                field_name=self.field_name,
                message=MISSING_FIELD_MESSAGE
            )

    @property
    def rule_type(self) -> str:
        return "required_field"
