from __future__ import annotations

import os
from collections.abc import Mapping

from awsconf.config.aws_config import AWSConfig
from awsconf.logging_config import get_logger

logger = get_logger(__name__)


def _required_env(environ: Mapping[str, str], *names: str) -> str | None:
    # The first variable that is set wins, even when blank, so the builder echoes what it got.
    for name in names:
        value = environ.get(name)
        if value is not None:
            return value.strip()
    return None


def _optional_env(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(name)
    if value is None or not value.strip():
        return None
    return value


def load_aws_config_from_env(environ: Mapping[str, str] | None = None) -> AWSConfig:
    environ = os.environ if environ is None else environ
    scheme = _optional_env(environ, "AWS_HTTP_SCHEME")
    config = AWSConfig.from_options(
        region=_required_env(environ, "AWS_REGION", "AWS_DEFAULT_REGION"),
        access_key_id=_required_env(environ, "AWS_ACCESS_KEY_ID"),
        secret_access_key=_required_env(environ, "AWS_SECRET_ACCESS_KEY"),
        session_token=_optional_env(environ, "AWS_SESSION_TOKEN"),
        scheme=scheme.strip().lower() if scheme else None,
        endpoint=_optional_env(environ, "AWS_ENDPOINT"),
    )
    logger.debug(
        "Loaded AWS config from environment",
        extra={"region": config.region, "endpoint": config.endpoint, "scheme": config.scheme.value},
    )
    return config
