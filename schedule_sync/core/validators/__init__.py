"""
Row validation rule implementations.

Provides validators for row arity, required fields and enumerated values.
"""

from .base_validator import BaseValidator, ValidationError
from .column_count_validator import ColumnCountValidator
from .enum_validator import EnumValidator
from .required_field_validator import RequiredFieldValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "ColumnCountValidator",
    "RequiredFieldValidator",
    "EnumValidator",
]
