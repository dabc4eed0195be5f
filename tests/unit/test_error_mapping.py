"""
Tests for DynamoDB error mapping.

Every botocore ClientError must come out as one of the sample's exceptions,
carrying the outcome callers use to choose between retry and abort.
"""

import pytest
from botocore.exceptions import ClientError

from dynamodb_sample.core.table_gateway import map_dynamodb_error
from dynamodb_sample.exceptions import (
    ConnectionError, ConflictError, NotFoundError, Outcome,
    RetryableError, ValidationError, outcome_for
)


def create_client_error(error_code: str, message: str = "Test error") -> ClientError:
    """Helper to create ClientError for testing."""
    return ClientError(
        error_response={
            'Error': {
                'Code': error_code,
                'Message': message
            }
        },
        operation_name='TestOperation'
    )


class TestConflictErrors:

    def test_table_already_exists(self):
        """CreateTable on an existing table reports ResourceInUseException."""
        error = create_client_error('ResourceInUseException', 'Table already exists: Person')

        result = map_dynamodb_error(error, 'CreateTable', 'Person')

        assert isinstance(result, ConflictError)
        assert result.resource_id == 'Person'
        assert result.outcome == Outcome.CONFLICT
        assert result.original_error is error

    def test_conditional_check_failed(self):
        error = create_client_error('ConditionalCheckFailedException', 'The conditional request failed')

        result = map_dynamodb_error(error, 'PutItem', 'Person', "{'id': 1}")

        assert isinstance(result, ConflictError)
        assert "{'id': 1}" in str(result)


class TestNotFoundErrors:

    def test_resource_not_found(self):
        error = create_client_error('ResourceNotFoundException', 'Requested resource not found')

        result = map_dynamodb_error(error, 'DescribeTable', 'Person')

        assert isinstance(result, NotFoundError)
        assert result.resource_type == 'table'
        assert result.resource_name == 'Person'
        assert result.outcome == Outcome.NOT_FOUND


class TestRetryableErrors:

    @pytest.mark.parametrize('error_code', [
        'ProvisionedThroughputExceededException',
        'RequestLimitExceeded',
        'ThrottlingException',
        'InternalServerError',
        'ServiceUnavailable',
        'LimitExceededException',
        'RequestTimeoutException',
    ])
    def test_transient_codes(self, error_code):
        result = map_dynamodb_error(create_client_error(error_code), 'PutItem', 'Person')

        assert isinstance(result, RetryableError)
        assert result.outcome == Outcome.TRANSIENT_FAILURE
        assert result.outcome.retryable


class TestFatalErrors:

    def test_validation_exception(self):
        error = create_client_error(
            'ValidationException',
            'The provisioned throughput for the table will not change'
        )

        result = map_dynamodb_error(error, 'UpdateTable', 'Person')

        assert isinstance(result, ValidationError)
        assert result.outcome == Outcome.FATAL_FAILURE
        assert not result.outcome.retryable

    @pytest.mark.parametrize('error_code', [
        'UnrecognizedClientException',
        'AccessDeniedException',
        'ExpiredTokenException',
        'InvalidSignatureException',
    ])
    def test_credential_errors(self, error_code):
        result = map_dynamodb_error(create_client_error(error_code), 'ListTables', '*')

        assert isinstance(result, ConnectionError)
        assert result.outcome == Outcome.FATAL_FAILURE

    def test_unknown_error_code_logs_warning(self, caplog):
        error = create_client_error('SomethingNewException', 'New failure mode')

        result = map_dynamodb_error(error, 'GetItem', 'Person')

        assert isinstance(result, ConnectionError)
        assert "SomethingNewException" in caplog.text


class TestOutcomeFor:

    def test_foreign_exception_is_fatal(self):
        assert outcome_for(RuntimeError("boom")) == Outcome.FATAL_FAILURE

    def test_sample_exception_uses_its_outcome(self):
        assert outcome_for(RetryableError("slow down")) == Outcome.TRANSIENT_FAILURE

    def test_error_context_in_string(self):
        error = ConflictError("Resource in use", resource_id="Person")

        assert str(error) == "Resource in use (Context: resource_id=Person)"
        assert "ConflictError(message='Resource in use'" in repr(error)
