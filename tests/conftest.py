"""Global test configuration and fixtures."""

import os
from unittest.mock import Mock

import boto3
import pytest
from botocore.stub import Stubber

from awsdata.providers.aws.infrastructure.aws_client import AWSClient


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up fake AWS credentials so no test can reach a real account."""
    os.environ.update(
        {
            "AWS_DEFAULT_REGION": "us-east-1",
            "AWS_ACCESS_KEY_ID": "testing",
            "AWS_SECRET_ACCESS_KEY": "testing",
            "AWS_SECURITY_TOKEN": "testing",
            "AWS_SESSION_TOKEN": "testing",
        }
    )


@pytest.fixture(autouse=True)
def clear_awsdata_env(monkeypatch):
    """Keep AWSDATA_* variables from the developer shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("AWSDATA_"):
            monkeypatch.delenv(key)


@pytest.fixture
def rds_client():
    """Real botocore RDS client; pair it with rds_stubber."""
    return boto3.client("rds", region_name="us-east-1")


@pytest.fixture
def rds_stubber(rds_client):
    """Active Stubber for the RDS client."""
    with Stubber(rds_client) as stubber:
        yield stubber


@pytest.fixture
def lex_client():
    """Real botocore Lex Model Building Service client."""
    return boto3.client("lex-models", region_name="us-east-1")


@pytest.fixture
def lex_stubber(lex_client):
    """Active Stubber for the Lex client."""
    with Stubber(lex_client) as stubber:
        yield stubber


@pytest.fixture
def aws_client(rds_client, lex_client):
    """AWSClient stand-in wired to the stubbed service clients."""
    client = Mock(spec=AWSClient)
    client.rds_client = rds_client
    client.lex_models_client = lex_client
    return client
