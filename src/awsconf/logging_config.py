from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any


_RESERVED_RECORD_FIELDS = set(logging.makeLogRecord({}).__dict__.keys()) | {"message", "asctime"}

# Extra fields whose values are credentials and must never reach a log sink.
_SECRET_FIELDS = frozenset({
    "secret_access_key",
    "secretAccessKey",
    "aws_secret_access_key",
    "session_token",
    "sessionToken",
    "aws_session_token",
})
_KEY_ID_FIELDS = frozenset({"access_key_id", "accessKeyId", "aws_access_key_id"})

_NOISY_LOGGERS = ("botocore", "boto3", "urllib3")


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def mask_credential(value: Any, visible: int = 4) -> str:
    """Mask a credential, keeping only its last ``visible`` characters (AKIA...WXYZ style)."""
    if value is None:
        return "None"
    text = str(value)
    if len(text) <= visible:
        return "*" * len(text)
    return "*" * (len(text) - visible) + text[-visible:]


def _redact(key: str, value: Any) -> Any:
    if key in _SECRET_FIELDS:
        return "***"
    if key in _KEY_ID_FIELDS:
        return mask_credential(value)
    return value


def _extract_extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: _redact(key, value)
        for key, value in record.__dict__.items()
        if key not in _RESERVED_RECORD_FIELDS and not key.startswith("_")
    }


class JsonFormatter(logging.Formatter):
    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "message": record.getMessage(),
        }

        extras = _extract_extra_fields(record)
        if extras:
            payload["context"] = extras

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class TextFormatter(logging.Formatter):
    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, timezone.utc).strftime("%Y-%m-%dT%H:%M:%S%z")
        line = f"{timestamp} {record.levelname} {record.name} service={self.service} message={record.getMessage()}"

        extras = _extract_extra_fields(record)
        if extras:
            line += " " + " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def _resolve_level(name: str | None, default: int) -> int:
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: str | None = None, service: str = "awsconf") -> None:
    """
    Install a single stdout handler on the root logger.

    LOG_LEVEL picks the level, LOG_JSON switches to JSON lines (on by default inside
    AWS Lambda), and BOTOCORE_LOG_LEVEL caps the SDK loggers (WARNING unless set).
    """
    resolved_level = _resolve_level(level or os.getenv("LOG_LEVEL"), logging.INFO)
    aws_runtime = bool(os.getenv("AWS_LAMBDA_FUNCTION_NAME"))
    use_json = _parse_bool(os.getenv("LOG_JSON"), default=aws_runtime)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonFormatter(service=service) if use_json else TextFormatter(service=service))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(resolved_level)

    sdk_level = _resolve_level(os.getenv("BOTOCORE_LOG_LEVEL"), logging.WARNING)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)
    logging.captureWarnings(True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def with_context(logger: logging.Logger, **context: Any) -> logging.LoggerAdapter:
    return logging.LoggerAdapter(logger, extra=context)
