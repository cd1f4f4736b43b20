from io import StringIO

import boto3
import pytest
from moto import mock_aws
from rich.console import Console

REGION = "us-east-1"


@pytest.fixture(scope="function")
def aws_credentials(monkeypatch):
    """Mocked AWS Credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)


@pytest.fixture(scope="function")
def dynamodb_mock(aws_credentials):
    with mock_aws():
        yield boto3.client("dynamodb", region_name=REGION)


@pytest.fixture(scope="function")
def kinesis_mock(aws_credentials):
    with mock_aws():
        yield boto3.client("kinesis", region_name=REGION)


@pytest.fixture(scope="function")
def polly_mock(aws_credentials):
    with mock_aws():
        yield boto3.client("polly", region_name=REGION)


@pytest.fixture(scope="function")
def s3_mock(aws_credentials):
    with mock_aws():
        yield boto3.client("s3", region_name=REGION)


@pytest.fixture(scope="function")
def cloudwatch_mock(aws_credentials):
    with mock_aws():
        yield boto3.client("cloudwatch", region_name=REGION)


@pytest.fixture
def consoles(mocker):
    """Routes presenter output to buffers; returns (stdout, stderr) buffers."""
    out_buffer, err_buffer = StringIO(), StringIO()
    out_console = Console(file=out_buffer, width=200)
    err_console = Console(file=err_buffer, width=200)

    mocker.patch("oneshot.core.presenter.console_out", out_console)
    mocker.patch("oneshot.core.presenter.console_err", err_console)
    mocker.patch("oneshot.core.runner.console_err", err_console)
    return out_buffer, err_buffer
