import logging

import pytest

ACCESS_KEY_ID = "AKIA1234567890AB"
SECRET_ACCESS_KEY = "abcdefghijklmnop"

AWS_ENV_VARS = (
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_HTTP_SCHEME",
    "AWS_ENDPOINT",
)


@pytest.fixture
def valid_options():
    return {
        "region": "us-east-1",
        "accessKeyId": ACCESS_KEY_ID,
        "secretAccessKey": SECRET_ACCESS_KEY,
    }


@pytest.fixture
def clean_aws_env(monkeypatch):
    for name in AWS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    sdk_levels = {name: logging.getLogger(name).level for name in ("botocore", "boto3", "urllib3")}
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, sdk_level in sdk_levels.items():
        logging.getLogger(name).setLevel(sdk_level)
