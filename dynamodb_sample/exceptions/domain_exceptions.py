"""
Domain-Specific Exceptions for the DynamoDB sample

This module holds every exception that extends the base DynamoDBSampleError.
Each class declares the Outcome it represents.

Organized by category:
1. Data Validation Errors
2. Resource Not Found Errors
3. Conflict and Conditional Errors
4. Infrastructure and Retry Errors
5. Waiting Errors
"""

from typing import Any, Dict, Optional

from .base import DynamoDBSampleError
from .outcomes import Outcome


# =============================================================================
# Data Validation Errors
# =============================================================================

class ValidationError(DynamoDBSampleError):
    """Raised when data validation fails.

    Used for:
    - Pydantic model validation failures
    - Attribute mapping declaration errors
    - DynamoDB ValidationException responses
    """

    outcome = Outcome.FATAL_FAILURE

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {}
        if self.errors:
            context['validation_errors'] = self.errors
        super().__init__(message, original_error, context)


# =============================================================================
# Resource Not Found Errors
# =============================================================================

class ItemNotFoundError(DynamoDBSampleError):
    """Raised when a specific item is required but missing."""

    outcome = Outcome.NOT_FOUND

    def __init__(self, table_name: str, key: dict, original_error: Optional[Exception] = None):
        """Initialize item not found error.

        Args:
            table_name: Name of the DynamoDB table
            key: The key that was not found
            original_error: The original exception that caused this error
        """
        self.table_name = table_name
        self.key = key
        message = f"Item not found in table '{table_name}' with key: {key}"
        context = {
            'table_name': table_name,
            'key': key
        }
        super().__init__(message, original_error, context)


class NotFoundError(DynamoDBSampleError):
    """Raised when a DynamoDB resource (table, index) is not found."""

    outcome = Outcome.NOT_FOUND

    def __init__(self, message: str, resource_type: Optional[str] = None, resource_name: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize not found error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource not found (e.g., 'table', 'index')
            resource_name: Name of the resource not found
            original_error: The original exception that caused this error
        """
        self.resource_type = resource_type
        self.resource_name = resource_name
        context = {}
        if resource_type:
            context['resource_type'] = resource_type
        if resource_name:
            context['resource_name'] = resource_name
        super().__init__(message, original_error, context)


# =============================================================================
# Conflict and Conditional Errors
# =============================================================================

class ConflictError(DynamoDBSampleError):
    """Raised when an operation collides with existing state.

    Used for:
    - CreateTable on a table that already exists (ResourceInUseException)
    - UpdateTable/DeleteTable while the table is still changing
    - ConditionalCheckFailedException
    """

    outcome = Outcome.CONFLICT

    def __init__(self, message: str, resource_id: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize conflict error.

        Args:
            message: Human-readable error message
            resource_id: ID of the conflicting resource (table name or item key)
            original_error: The original exception that caused this error
        """
        self.resource_id = resource_id
        context = {}
        if resource_id:
            context['resource_id'] = resource_id
        super().__init__(message, original_error, context)


# =============================================================================
# Infrastructure and Retry Errors
# =============================================================================

class ConnectionError(DynamoDBSampleError):
    """Raised when talking to DynamoDB fails for a non-transient reason.

    Used for:
    - Authentication/authorization failures
    - Invalid endpoint configurations
    - Unknown service errors
    """

    outcome = Outcome.FATAL_FAILURE

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)


class RetryableError(DynamoDBSampleError):
    """Raised when an operation fails due to throttling or temporary unavailability."""

    outcome = Outcome.TRANSIENT_FAILURE

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message, original_error)


# =============================================================================
# Waiting Errors
# =============================================================================

class WaitTimeoutError(DynamoDBSampleError):
    """Raised when a table does not reach the expected status within the poll budget."""

    outcome = Outcome.TIMEOUT

    def __init__(self, table_name: str, expected_status: str, attempts: int, last_status: Optional[str] = None):
        self.table_name = table_name
        self.expected_status = expected_status
        self.attempts = attempts
        self.last_status = last_status
        message = f"Table '{table_name}' did not reach {expected_status} after {attempts} attempts"
        context = {'last_status': last_status} if last_status else {}
        super().__init__(message, None, context)


class OperationCancelledError(DynamoDBSampleError):
    """Raised when a wait is cancelled through its cancellation event."""

    outcome = Outcome.CANCELLED

    def __init__(self, table_name: str, expected_status: str):
        self.table_name = table_name
        self.expected_status = expected_status
        super().__init__(f"Waiting for table '{table_name}' to reach {expected_status} was cancelled")


def outcome_for(error: BaseException) -> Outcome:
    """Return the Outcome represented by an exception.

    Errors that do not belong to this package are treated as fatal.
    """
    if isinstance(error, DynamoDBSampleError):
        return error.outcome
    return Outcome.FATAL_FAILURE
