import os
from unittest.mock import patch

import pytest

from dynamodb_sample.config import DynamoDBConfig


class TestDynamoDBConfig:
    """Test cases for DynamoDBConfig."""

    def test_default_config(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {"AWS_REGION": "us-west-2"}):
            config = DynamoDBConfig()

            assert config.region_name == "us-west-2"
            assert config.max_pool_connections == 10
            assert config.retries == 3
            assert config.timeout_seconds == 30.0
            assert config.environment == "prod"
            assert config.wait_max_attempts == 25
            assert config.wait_delay_seconds == 2.0

    def test_config_from_env_vars(self):
        """Test configuration from environment variables."""
        env_vars = {
            "AWS_ACCESS_KEY_ID": "test_key",
            "AWS_SECRET_ACCESS_KEY": "test_secret",
            "AWS_REGION": "eu-west-1",
            "DYNAMODB_ENDPOINT_URL": "http://localhost:8000",
            "DYNAMODB_TABLE_PREFIX": "test",
            "ENVIRONMENT": "staging",
            "DYNAMODB_WAIT_MAX_ATTEMPTS": "7",
            "DYNAMODB_WAIT_DELAY_SECONDS": "0.25",
        }

        with patch.dict(os.environ, env_vars):
            config = DynamoDBConfig.from_env()

            assert config.aws_access_key_id == "test_key"
            assert config.aws_secret_access_key == "test_secret"
            assert config.region_name == "eu-west-1"
            assert config.endpoint_url == "http://localhost:8000"
            assert config.table_prefix == "test"
            assert config.environment == "staging"
            assert config.wait_max_attempts == 7
            assert config.wait_delay_seconds == 0.25

    def test_table_name_generation(self):
        """Test table name generation with prefix and environment."""
        config = DynamoDBConfig(table_prefix="myapp", environment="dev")

        assert config.get_table_name("Person") == "myapp_dev_Person"

    def test_table_name_generation_prod(self):
        """Test table name generation in production (no environment suffix)."""
        config = DynamoDBConfig(table_prefix="myapp", environment="prod")

        assert config.get_table_name("Person") == "myapp_Person"

    def test_table_name_generation_no_prefix_prod(self):
        """The tutorial table keeps its plain name by default."""
        config = DynamoDBConfig(table_prefix="", environment="prod")

        assert config.get_table_name("Person") == "Person"

    def test_local_development_config(self):
        """Test local development configuration."""
        config = DynamoDBConfig.for_local_development()

        assert config.aws_access_key_id == "local"
        assert config.aws_secret_access_key == "local"
        assert config.endpoint_url == "http://localhost:8000"
        assert config.environment == "dev"
        assert config.enable_debug_logging is True

    def test_environment_validation(self):
        """Test environment validation."""
        with pytest.raises(ValueError, match="Environment must be one of"):
            DynamoDBConfig(environment="invalid")

    def test_region_validation(self):
        """Test region validation."""
        with pytest.raises(ValueError, match="AWS region name is required"):
            DynamoDBConfig(region_name="")

    def test_wait_attempts_validation(self):
        with pytest.raises(ValueError, match="wait_max_attempts"):
            DynamoDBConfig(wait_max_attempts=0)

    def test_backoff_validation(self):
        with pytest.raises(ValueError, match="wait_backoff_factor"):
            DynamoDBConfig(wait_backoff_factor=0.5)

    def test_assignment_is_validated(self):
        config = DynamoDBConfig()
        with pytest.raises(ValueError):
            config.environment = "qa"
