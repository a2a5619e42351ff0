"""
Unit tests for command-line input validation utilities.
"""

import pytest

from schedule_sync.utils.validation import (
    InputValidationError,
    validate_file_path,
    validate_owner_id,
)


@pytest.mark.unit
class TestValidateOwnerId:

    def test_valid(self):
        assert validate_owner_id("1") == "1"
        assert validate_owner_id("  user_7  ") == "user_7"
        assert validate_owner_id("dept-2.a") == "dept-2.a"

    def test_invalid(self):
        with pytest.raises(InputValidationError, match="must be a non-empty string"):
            validate_owner_id("")

        with pytest.raises(InputValidationError, match="cannot be empty"):
            validate_owner_id("   ")

        with pytest.raises(InputValidationError, match="invalid characters"):
            validate_owner_id("a b")

        with pytest.raises(InputValidationError, match="maximum length"):
            validate_owner_id("x" * 256)


@pytest.mark.unit
class TestValidateFilePath:

    def test_valid(self):
        assert validate_file_path(" data/horarios.csv ") == "data/horarios.csv"

    def test_invalid(self):
        with pytest.raises(InputValidationError, match="non-empty"):
            validate_file_path("")

        with pytest.raises(InputValidationError, match="null bytes"):
            validate_file_path("a\x00.csv")

        with pytest.raises(InputValidationError, match="wildcards"):
            validate_file_path("data/*.csv")

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_file_path("   ")
