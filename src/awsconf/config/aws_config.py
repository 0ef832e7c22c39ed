from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from awsconf.config.errors import InvalidAWSConfigError
from awsconf.config.options import AWSConfigOptions, parse_options
from awsconf.config.rules import MAX_CREDENTIAL_LENGTH, MIN_CREDENTIAL_LENGTH, REQUIRED_FIELDS, check_required_field
from awsconf.http import HTTPScheme

__all__ = [
    "DEFAULT_ENDPOINT",
    "DEFAULT_SCHEME",
    "MAX_CREDENTIAL_LENGTH",
    "MIN_CREDENTIAL_LENGTH",
    "AWSConfig",
    "build_aws_config",
]

DEFAULT_SCHEME = HTTPScheme.HTTPS
# Callers targeting localstack and similar pass a full host, e.g. "localhost:4566".
DEFAULT_ENDPOINT = "amazonaws.com"


@dataclass(frozen=True)
class AWSConfig:
    region: str
    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: str | None = field(default=None, repr=False)
    scheme: HTTPScheme = DEFAULT_SCHEME
    endpoint: str = DEFAULT_ENDPOINT

    def __post_init__(self):
        values = {"region": self.region, "accessKeyId": self.access_key_id, "secretAccessKey": self.secret_access_key}
        for name, *_ in REQUIRED_FIELDS:
            check_required_field(name, values[name])

        if not isinstance(self.scheme, HTTPScheme):
            try:
                object.__setattr__(self, "scheme", HTTPScheme(self.scheme))
            except ValueError as exc:
                allowed = ", ".join(s.value for s in HTTPScheme)
                raise InvalidAWSConfigError(
                    f"invalid AWS HTTP scheme; reason: expected one of {allowed}, got `{self.scheme!r}`",
                    field="scheme",
                ) from exc

        if not isinstance(self.endpoint, str):
            raise InvalidAWSConfigError(
                f"invalid AWS endpoint; reason: expected a host name (e.g. \"amazonaws.com\"), got `{self.endpoint!r}`",
                field="endpoint",
            )

    @classmethod
    def from_options(cls, options: AWSConfigOptions | Mapping[str, Any] | None = None, **overrides: Any) -> AWSConfig:
        parsed = parse_options(options, **overrides)
        kwargs: dict[str, Any] = {
            "region": parsed.region,
            "access_key_id": parsed.access_key_id,
            "secret_access_key": parsed.secret_access_key,
            "session_token": parsed.session_token,
        }
        if parsed.scheme is not None:
            kwargs["scheme"] = parsed.scheme
        if parsed.endpoint is not None:
            kwargs["endpoint"] = parsed.endpoint
        return cls(**kwargs)

    def as_dict(self) -> dict[str, str]:
        payload = {
            "region": self.region,
            "accessKeyId": self.access_key_id,
            "secretAccessKey": self.secret_access_key,
            "scheme": self.scheme.value,
            "endpoint": self.endpoint,
        }
        if self.session_token is not None:
            payload["sessionToken"] = self.session_token
        return payload


def build_aws_config(options: AWSConfigOptions | Mapping[str, Any] | None = None, **overrides: Any) -> AWSConfig:
    return AWSConfig.from_options(options, **overrides)
