"""
Test configuration and fixtures for the DynamoDB sample.

Provides a moto-backed DynamoDB resource plus configuration and API fixtures
wired to it.
"""

import sys
from pathlib import Path

# Add parent directory to path so we can import dynamodb_sample
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest
from moto import mock_aws

from dynamodb_sample import (
    DynamoDBConfig,
    PersonReadApi,
    PersonWriteApi,
    TableAdminApi,
    TableReadApi,
    WaitPolicy,
)


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake credentials so nothing can reach a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("DYNAMODB_ENDPOINT_URL", raising=False)
    monkeypatch.delenv("DYNAMODB_TABLE_PREFIX", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)


@pytest.fixture
def mock_dynamodb_config():
    """DynamoDB configuration for mocked testing (table names unprefixed)."""
    return DynamoDBConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,  # Use default AWS endpoint for moto
        environment="prod",
        table_prefix="",
        wait_max_attempts=3,
        wait_delay_seconds=0,
    )


@pytest.fixture
def fast_policy():
    """Wait policy that never sleeps."""
    return WaitPolicy(max_attempts=3, delay_seconds=0, backoff_factor=1, max_delay_seconds=0)


@pytest.fixture
def mock_dynamodb_resource():
    """Mock DynamoDB resource."""
    with mock_aws():
        yield boto3.resource('dynamodb', region_name='us-east-1')


@pytest.fixture
def person_table(mock_dynamodb_resource):
    """Create the Person table for testing."""
    table = mock_dynamodb_resource.create_table(
        TableName='Person',
        KeySchema=[
            {'AttributeName': 'id', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'id', 'AttributeType': 'N'}
        ],
        BillingMode='PROVISIONED',
        ProvisionedThroughput={'ReadCapacityUnits': 5, 'WriteCapacityUnits': 5}
    )
    return table


@pytest.fixture
def person_read_api(mock_dynamodb_config, mock_dynamodb_resource, person_table):
    """Person read API with mocked DynamoDB."""
    return PersonReadApi(mock_dynamodb_config, mock_dynamodb_resource)


@pytest.fixture
def person_write_api(mock_dynamodb_config, mock_dynamodb_resource, person_table):
    """Person write API with mocked DynamoDB."""
    return PersonWriteApi(mock_dynamodb_config, mock_dynamodb_resource)


@pytest.fixture
def table_read_api(mock_dynamodb_config, mock_dynamodb_resource):
    """Table read API with mocked DynamoDB."""
    return TableReadApi(mock_dynamodb_config, mock_dynamodb_resource)


@pytest.fixture
def table_admin_api(mock_dynamodb_config, mock_dynamodb_resource, fast_policy):
    """Table admin API with mocked DynamoDB and a non-sleeping wait policy."""
    return TableAdminApi(mock_dynamodb_config, mock_dynamodb_resource, policy=fast_policy)
