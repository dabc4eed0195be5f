"""
DynamoDB Sample

Getting started with Amazon DynamoDB using boto3 and Pydantic: table
lifecycle (create, describe, update throughput, delete, list) and CRUD on a
single Person record type, with typed errors and bounded status waits.
"""

from .config import DynamoDBConfig
from .exceptions import (
    ConflictError,
    ConnectionError,
    DynamoDBSampleError,
    ItemNotFoundError,
    NotFoundError,
    OperationCancelledError,
    Outcome,
    RetryableError,
    ValidationError,
    WaitTimeoutError,
)
from .models import (
    Person,
    ProvisionedThroughput,
    TableInfo,
    AttributeSpec,
    ItemMapping,
    PERSON_MAPPING,
    StepResult,
)
from .core import (
    TableGateway,
    WaitPolicy,
    create_dynamodb_resource,
    create_table_gateway,
)
from .handlers import (
    PersonReadApi,
    PersonWriteApi,
    TableAdminApi,
    TableReadApi,
)

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",

    # Exceptions and outcomes
    "ConflictError",
    "ConnectionError",
    "DynamoDBSampleError",
    "ItemNotFoundError",
    "NotFoundError",
    "OperationCancelledError",
    "Outcome",
    "RetryableError",
    "ValidationError",
    "WaitTimeoutError",

    # Models
    "Person",
    "ProvisionedThroughput",
    "TableInfo",
    "AttributeSpec",
    "ItemMapping",
    "PERSON_MAPPING",
    "StepResult",

    # Infrastructure
    "TableGateway",
    "WaitPolicy",
    "create_dynamodb_resource",
    "create_table_gateway",

    # APIs
    "PersonReadApi",
    "PersonWriteApi",
    "TableAdminApi",
    "TableReadApi",
]
