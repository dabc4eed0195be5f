import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()


class DynamoDBConfig(BaseModel):
    """Configuration for DynamoDB connection and operations."""

    # Credentials are optional; when unset boto3 falls back to ~/.aws/credentials
    # and the standard environment variables.
    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"),
        description="AWS region name"
    )

    # DynamoDB specific settings
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for local development)"
    )

    # Table configuration
    table_prefix: str = Field(
        default_factory=lambda: os.getenv("DYNAMODB_TABLE_PREFIX", ""),
        description="Prefix to add to all table names"
    )

    # Connection settings
    max_pool_connections: int = Field(
        default=10,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=3,
        description="Number of retry attempts for failed requests"
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Request timeout in seconds"
    )

    # Environment settings
    environment: str = Field(
        default_factory=lambda: os.getenv("ENVIRONMENT", "prod"),
        description="Current environment (dev, test, staging, prod)"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("DYNAMODB_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for DynamoDB operations"
    )

    # Table status polling
    wait_max_attempts: int = Field(
        default_factory=lambda: int(os.getenv("DYNAMODB_WAIT_MAX_ATTEMPTS", "25")),
        description="Maximum DescribeTable polls while waiting for a table status"
    )

    wait_delay_seconds: float = Field(
        default_factory=lambda: float(os.getenv("DYNAMODB_WAIT_DELAY_SECONDS", "2.0")),
        description="Delay before the second poll"
    )

    wait_backoff_factor: float = Field(
        default_factory=lambda: float(os.getenv("DYNAMODB_WAIT_BACKOFF_FACTOR", "1.5")),
        description="Multiplier applied to the delay after every poll"
    )

    wait_max_delay_seconds: float = Field(
        default_factory=lambda: float(os.getenv("DYNAMODB_WAIT_MAX_DELAY_SECONDS", "20.0")),
        description="Upper bound for the delay between polls"
    )

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @field_validator('environment')
    @classmethod
    def validate_environment(cls, v):
        """Validate environment value."""
        valid_environments = ['dev', 'test', 'staging', 'prod']
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of: {valid_environments}")
        return v

    @field_validator('wait_max_attempts')
    @classmethod
    def validate_wait_attempts(cls, v):
        if v < 1:
            raise ValueError("wait_max_attempts must be at least 1")
        return v

    @field_validator('wait_delay_seconds', 'wait_max_delay_seconds')
    @classmethod
    def validate_wait_delay(cls, v):
        if v < 0:
            raise ValueError("Wait delays cannot be negative")
        return v

    @field_validator('wait_backoff_factor')
    @classmethod
    def validate_backoff_factor(cls, v):
        if v < 1:
            raise ValueError("wait_backoff_factor must be >= 1")
        return v

    def get_table_name(self, base_name: str) -> str:
        """Get the full table name with prefix and environment.

        Args:
            base_name: Base table name

        Returns:
            Full table name with prefix and environment
        """
        parts = []

        if self.table_prefix:
            parts.append(self.table_prefix)

        if self.environment != "prod":
            parts.append(self.environment)

        parts.append(base_name)

        return "_".join(parts)

    @classmethod
    def from_env(cls) -> 'DynamoDBConfig':
        """Create configuration from environment variables.

        Returns:
            DynamoDBConfig instance
        """
        return cls()

    @classmethod
    def for_local_development(cls) -> 'DynamoDBConfig':
        """Create configuration for DynamoDB Local.

        Returns:
            DynamoDBConfig instance configured for local development
        """
        return cls(
            aws_access_key_id="local",
            aws_secret_access_key="local",
            region_name="us-east-1",
            endpoint_url="http://localhost:8000",
            environment="dev",
            enable_debug_logging=True,
            wait_delay_seconds=0.5,
        )

    model_config = ConfigDict(validate_assignment=True)
