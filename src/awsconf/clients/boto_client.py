from __future__ import annotations

from typing import Any

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError

from awsconf.config.aws_config import DEFAULT_ENDPOINT, AWSConfig
from awsconf.http import HTTPScheme
from awsconf.logging_config import get_logger, with_context

logger = get_logger(__name__)


class AWSClientError(RuntimeError):
    """Raised when a boto3 client cannot be built from an AWSConfig."""


def service_endpoint_url(config: AWSConfig, service: str) -> str:
    if not service:
        raise ValueError("service must be a non-empty string, e.g. 's3' or 'sqs'.")
    if config.endpoint == DEFAULT_ENDPOINT:
        host = f"{service}.{config.region}.{config.endpoint}"
    else:
        host = config.endpoint
    return f"{config.scheme.value}://{host}"


def client_kwargs(config: AWSConfig, service: str, signature_version: str | None = None) -> dict[str, Any]:
    botocore_config = Config(signature_version=signature_version) if signature_version else Config()
    kwargs: dict[str, Any] = {
        "region_name": config.region,
        "aws_access_key_id": config.access_key_id,
        "aws_secret_access_key": config.secret_access_key,
        "endpoint_url": service_endpoint_url(config, service),
        "use_ssl": config.scheme is HTTPScheme.HTTPS,
        "config": botocore_config,
    }
    if config.session_token is not None:
        kwargs["aws_session_token"] = config.session_token
    return kwargs


def create_client(config: AWSConfig, service: str, signature_version: str | None = None, **overrides: Any):
    kwargs = client_kwargs(config, service, signature_version=signature_version)
    kwargs.update(overrides)
    log = with_context(logger, service=service, region=config.region, endpoint_url=kwargs["endpoint_url"])
    try:
        client = boto3.client(service, **kwargs)
    except BotoCoreError as e:
        raise AWSClientError(f"Error creating {service!r} client for region {config.region!r}: {e}") from e
    log.debug("Created boto3 client")
    return client
