# Base exception class
from .base import DynamoDBSampleError
from .outcomes import Outcome

# Domain-specific exceptions
from .domain_exceptions import (
    ValidationError,
    ItemNotFoundError,
    NotFoundError,
    ConflictError,
    ConnectionError,
    RetryableError,
    WaitTimeoutError,
    OperationCancelledError,
    outcome_for,
)

__all__ = [
    # Base exception
    "DynamoDBSampleError",
    "Outcome",
    "outcome_for",

    # Domain exceptions (alphabetically ordered)
    "ConflictError",
    "ConnectionError",
    "ItemNotFoundError",
    "NotFoundError",
    "OperationCancelledError",
    "RetryableError",
    "ValidationError",
    "WaitTimeoutError",
]
