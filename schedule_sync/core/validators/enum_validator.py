"""
EnumValidator - validates that a field holds one of a closed set of values.
"""

from enum import Enum
from typing import Any

from .base_validator import BaseValidator, ValidationError


class EnumValidator(BaseValidator):
    """
    Validates enumerated values. Matching is exact and case-sensitive;
    no normalization is applied.

    Parameters:
    - enum: An Enum class whose member values are the allowed values, or
    - allowed: An explicit list of allowed strings
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        enum_class = self.parameters.get("enum")
        allowed = self.parameters.get("allowed")

        if enum_class is not None:
            if not (isinstance(enum_class, type) and issubclass(enum_class, Enum)):
                raise ValueError("'enum' parameter must be an Enum class")
            self.allowed = [member.value for member in enum_class]
        elif allowed:
            self.allowed = list(allowed)
        else:
            raise ValueError("EnumValidator requires 'enum' or 'allowed' parameter")

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate that the value is one of the allowed values.

        Args:
            value: The field value to validate
            record: The whole row keyed by column name

        Raises:
            ValidationError: If value is not an allowed value
        """
        if value not in self.allowed:
            raise ValidationError(
                rule_name="enum",
                field_name=self.field_name,
                message=f'invalid {self.field_name} "{value}"'
            )

    @property
    def rule_type(self) -> str:
        return "enum"
