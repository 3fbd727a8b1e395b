"""Custom exceptions for the CV context with field and location references."""

from typing import Optional


class CVError(ValueError):
    """Base class for errors raised while reading a CV record."""

    pass


class MissingFieldError(CVError):
    """
    Exception raised when a required CV field is absent during decoding.

    Attributes:
        field_name: External (camelCase) key of the missing field
        path: Dotted location of the record that lacks the field (e.g., 'work[0]')
    """

    def __init__(self, field_name: str, path: str = ""):
        self.field_name = field_name
        self.path = path

        location = f" in {path}" if path else ""
        super().__init__(f"Missing required field '{field_name}'{location}")


class FieldTypeError(CVError):
    """
    Exception raised when a CV field holds a value of the wrong type.

    Attributes:
        field_name: External (camelCase) key of the offending field
        expected: Human-readable expected type (e.g., 'string', 'list')
        actual: Python type name of the value found
        path: Dotted location of the record holding the field
    """

    def __init__(self, field_name: str, expected: str, actual: str, path: str = ""):
        self.field_name = field_name
        self.expected = expected
        self.actual = actual
        self.path = path

        location = f" in {path}" if path else ""
        super().__init__(
            f"Field '{field_name}'{location} must be a {expected}, got {actual}"
        )


class DecodeError(CVError):
    """
    Exception raised when a CV source cannot be turned into a CV record.

    Wraps the structural cause (MissingFieldError, FieldTypeError or a syntax
    error from the JSON/YAML reader) so callers can inspect it.

    Attributes:
        message: Error description
        cause: The underlying exception
    """

    def __init__(self, message: str, cause: Optional[Exception] = None):
        self.message = message
        self.cause = cause

        parts = [message]
        if cause is not None:
            parts.append(f"Cause: {cause}")

        super().__init__("\n".join(parts))
