from __future__ import annotations

from typing import Any

from awsconf.config.errors import FieldLengthOutOfRangeError, MissingOrEmptyFieldError

MIN_CREDENTIAL_LENGTH = 16
MAX_CREDENTIAL_LENGTH = 128

# (field, message label, expected value, length-checked), in the order they are enforced.
REQUIRED_FIELDS = (
    ("region", "region", 'a valid AWS region name (e.g. "us-east-1")', False),
    ("accessKeyId", "access key ID", "a non empty string", True),
    ("secretAccessKey", "secret access key", "a non empty string", True),
)


def check_required_field(field_name: str, value: Any) -> None:
    for name, label, expected, length_checked in REQUIRED_FIELDS:
        if name != field_name:
            continue
        if not isinstance(value, str) or value == "":
            raise MissingOrEmptyFieldError(name, label, expected, value)
        if length_checked and not MIN_CREDENTIAL_LENGTH <= len(value) <= MAX_CREDENTIAL_LENGTH:
            raise FieldLengthOutOfRangeError(name, label, len(value), MIN_CREDENTIAL_LENGTH, MAX_CREDENTIAL_LENGTH)
        return
    raise KeyError(field_name)
