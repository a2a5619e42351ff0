"""
Input validation utilities for command-line arguments.

Checks user-supplied identifiers and paths before they reach the import
pipeline.
"""

import re


class InputValidationError(ValueError):
    """Raised when a command-line argument is unacceptable."""
    pass


def validate_owner_id(owner_id: str, field_name: str = "owner_id") -> str:
    """
    Validate an owner ID.

    Owner IDs must be non-empty strings containing only alphanumeric
    characters, hyphens, underscores and dots.

    Args:
        owner_id: The owner ID to validate
        field_name: Name of the field (for error messages)

    Returns:
        The validated owner ID (stripped of whitespace)

    Raises:
        InputValidationError: If validation fails

    Examples:
        >>> validate_owner_id(" 1 ")
        '1'
    """
    if not owner_id or not isinstance(owner_id, str):
        raise InputValidationError(f"{field_name} must be a non-empty string")

    owner_id = owner_id.strip()

    if not owner_id:
        raise InputValidationError(f"{field_name} cannot be empty or whitespace-only")

    if not re.match(r'^[a-zA-Z0-9_\-\.]+$', owner_id):
        raise InputValidationError(
            f"{field_name} contains invalid characters. "
            "Only alphanumeric, hyphens, underscores, and dots are allowed."
        )

    if len(owner_id) > 255:
        raise InputValidationError(f"{field_name} exceeds maximum length of 255 characters")

    return owner_id


def validate_file_path(file_path: str, field_name: str = "file_path") -> str:
    """
    Validate a file path argument.

    Args:
        file_path: The file path to validate
        field_name: Name of the field (for error messages)

    Returns:
        The validated file path (stripped of whitespace)

    Raises:
        InputValidationError: If validation fails

    Examples:
        >>> validate_file_path("data/horarios.csv")
        'data/horarios.csv'
    """
    if not file_path or not isinstance(file_path, str):
        raise InputValidationError(f"{field_name} must be a non-empty string")

    file_path = file_path.strip()

    if not file_path:
        raise InputValidationError(f"{field_name} cannot be empty or whitespace-only")

    if "\x00" in file_path:
        raise InputValidationError(f"{field_name} contains null bytes")

    if "*" in file_path or "?" in file_path:
        raise InputValidationError(f"{field_name} contains wildcards (* or ?)")

    return file_path
