from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from awsconf.config.errors import InvalidAWSConfigError
from awsconf.config.rules import REQUIRED_FIELDS, check_required_field
from awsconf.http import HTTPScheme


class AWSConnectionOptions(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True, frozen=True)
    scheme: Optional[HTTPScheme] = Field(None, description="The HTTP scheme to use when connecting to AWS.")
    endpoint: Optional[str] = Field(None, description="The AWS host to connect to, optionally with a port (e.g. 'localhost:4566').")


class AWSConfigOptions(AWSConnectionOptions):
    # Required fields are optional here so the config builder reports them in its own order.
    region: Optional[str] = Field(None, description="The AWS region to connect to (e.g. 'us-east-1').")
    access_key_id: Optional[str] = Field(None, alias="accessKeyId", description="The AWS access key id credential.")
    secret_access_key: Optional[str] = Field(None, alias="secretAccessKey", description="The AWS secret access key credential.")
    session_token: Optional[str] = Field(None, alias="sessionToken", description="The AWS session token, for temporary credentials.")


_FIELD_ORDER = ("region", "accessKeyId", "secretAccessKey", "sessionToken", "scheme", "endpoint")


def _alias_keys(payload: Mapping[str, Any]) -> dict[str, Any]:
    aliases = {name: info.alias for name, info in AWSConfigOptions.model_fields.items() if info.alias}
    return {aliases.get(key, key): value for key, value in payload.items()}


def parse_options(options: AWSConfigOptions | Mapping[str, Any] | None = None, **overrides: Any) -> AWSConfigOptions:
    """
    Normalize a loosely-typed options payload into AWSConfigOptions.
    Accepts camelCase or snake_case keys; keyword overrides win over the payload.
    Type-shape failures are raised as InvalidAWSConfigError, after any required
    field ahead of the failing one has passed its rule.
    """
    if isinstance(options, AWSConfigOptions) and not overrides:
        return options

    if options is None:
        payload: dict[str, Any] = {}
    elif isinstance(options, BaseModel):
        payload = options.model_dump(by_alias=True, exclude_unset=True)
    elif isinstance(options, Mapping):
        payload = _alias_keys(options)
    else:
        raise InvalidAWSConfigError(
            f"invalid AWS config options; reason: expected a mapping of options, got {type(options).__name__}"
        )
    payload.update(_alias_keys(overrides))

    try:
        return AWSConfigOptions.model_validate(payload)
    except ValidationError as exc:
        errors = sorted(exc.errors(), key=lambda err: _field_rank(_error_field(err)))
        _check_fields_before(_error_field(errors[0]), payload)
        error = errors[0]
        loc = ".".join(str(part) for part in error.get("loc", ())) or None
        raise InvalidAWSConfigError(
            f"invalid AWS config option `{loc}`; reason: {error.get('msg')}, got `{error.get('input')!r}`",
            field=loc,
        ) from exc


def _error_field(error: Mapping[str, Any]) -> str | None:
    loc = error.get("loc") or ()
    return str(loc[0]) if loc else None


def _field_rank(field_name: str | None) -> int:
    try:
        return _FIELD_ORDER.index(field_name)
    except ValueError:
        return len(_FIELD_ORDER)


def _check_fields_before(failed_field: str | None, payload: Mapping[str, Any]) -> None:
    # Earlier rules still win over a type error on a later field.
    for name, *_ in REQUIRED_FIELDS:
        if name == failed_field:
            return
        check_required_field(name, payload.get(name))
