import json
import logging

import pytest

from awsconf.logging_config import JsonFormatter, TextFormatter, configure_logging, mask_credential, with_context

from conftest import ACCESS_KEY_ID, SECRET_ACCESS_KEY


def _record(**extra):
    return logging.makeLogRecord({"name": "awsconf.test", "levelname": "INFO", "levelno": logging.INFO, "msg": "hello %s", "args": ("world",), **extra})


def test_mask_credential_keeps_last_characters():
    assert mask_credential(ACCESS_KEY_ID) == "*" * 12 + "90AB"
    assert mask_credential("abc") == "***"
    assert mask_credential(None) == "None"


def test_json_formatter_redacts_credentials():
    record = _record(region="us-east-1", secret_access_key=SECRET_ACCESS_KEY, access_key_id=ACCESS_KEY_ID, aws_session_token="tok")

    payload = json.loads(JsonFormatter(service="awsconf").format(record))

    assert payload["message"] == "hello world"
    assert payload["service"] == "awsconf"
    assert payload["level"] == "INFO"
    assert payload["context"]["region"] == "us-east-1"
    assert payload["context"]["secret_access_key"] == "***"
    assert payload["context"]["aws_session_token"] == "***"
    assert payload["context"]["access_key_id"].endswith("90AB")
    assert ACCESS_KEY_ID not in json.dumps(payload)


def test_text_formatter_includes_sorted_context():
    record = _record(region="us-east-1", endpoint="amazonaws.com", secretAccessKey=SECRET_ACCESS_KEY)

    line = TextFormatter(service="awsconf").format(record)

    assert "service=awsconf message=hello world" in line
    assert "endpoint='amazonaws.com' region='us-east-1' secretAccessKey='***'" in line
    assert SECRET_ACCESS_KEY not in line


def test_with_context_attaches_extra(caplog):
    caplog.set_level(logging.INFO, logger="awsconf.test")
    log = with_context(logging.getLogger("awsconf.test"), service="s3")

    log.info("created")

    assert caplog.records[-1].service == "s3"


@pytest.mark.parametrize("log_json, formatter_type", [("true", JsonFormatter), ("false", TextFormatter)])
def test_configure_logging(monkeypatch, restore_root_logger, log_json, formatter_type):
    monkeypatch.setenv("LOG_JSON", log_json)
    monkeypatch.delenv("BOTOCORE_LOG_LEVEL", raising=False)

    configure_logging(level="debug")

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, formatter_type)
    assert logging.getLogger("botocore").level == logging.WARNING


def test_configure_logging_defaults_to_json_in_lambda(monkeypatch, restore_root_logger):
    monkeypatch.delenv("LOG_JSON", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setenv("AWS_LAMBDA_FUNCTION_NAME", "fn")
    monkeypatch.setenv("BOTOCORE_LOG_LEVEL", "error")

    configure_logging()

    assert restore_root_logger.level == logging.INFO
    assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)
    assert logging.getLogger("boto3").level == logging.ERROR


def test_unknown_level_falls_back_to_info(monkeypatch, restore_root_logger):
    monkeypatch.delenv("LOG_JSON", raising=False)
    monkeypatch.delenv("AWS_LAMBDA_FUNCTION_NAME", raising=False)

    configure_logging(level="chatty")

    assert restore_root_logger.level == logging.INFO
