from __future__ import annotations

from typing import Any


class InvalidAWSConfigError(ValueError):
    """Raised when an AWS connection configuration fails validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class MissingOrEmptyFieldError(InvalidAWSConfigError):
    def __init__(self, field: str, label: str, expected: str, value: Any) -> None:
        super().__init__(f"invalid AWS {label}; reason: expected {expected}, got `{value!r}`", field=field)
        self.value = value


class FieldLengthOutOfRangeError(InvalidAWSConfigError):
    def __init__(self, field: str, label: str, length: int, min_length: int, max_length: int) -> None:
        super().__init__(
            f"invalid AWS {label}; reason: size should be between {min_length} and {max_length} characters, got {length}",
            field=field,
        )
        self.length = length
        self.min_length = min_length
        self.max_length = max_length
