"""
Thin DynamoDB Table Gateway

This module provides a lightweight wrapper around boto3 DynamoDB operations
for a single table: item puts/gets/deletes and the table lifecycle calls
(CreateTable, DescribeTable, UpdateTable, DeleteTable).

The gateway focuses on:
- Building the boto3 resource from configuration, or accepting one
- Mapping botocore ClientErrors to the sample's exceptions
- Logging every successful remote call

The boto3 resource is an explicit dependency. Pass one in (a moto-backed
resource in tests, a shared one in the driver) or let the gateway build its
own from the configuration on first use.
"""

import logging
from typing import Any, Dict, List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from ..config import DynamoDBConfig
from ..exceptions import (
    ConnectionError,
    ConflictError,
    NotFoundError,
    ValidationError,
    RetryableError
)

logger = logging.getLogger(__name__)


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: str,
    resource_id: Optional[str] = None
) -> Exception:
    """Map DynamoDB ClientError to domain-specific exceptions.

    Args:
        error: The boto3 ClientError
        operation: The operation that failed (e.g., "GetItem", "CreateTable")
        table_name: The DynamoDB table name
        resource_id: Optional resource identifier for context

    Returns:
        Appropriate domain exception
    """
    error_code = error.response['Error']['Code']
    error_message = error.response['Error']['Message']

    # Build context for error message
    context = f"{operation} on {table_name}"
    if resource_id:
        context += f" (resource: {resource_id})"

    full_message = f"{context}: {error_message}"

    if error_code == 'ConditionalCheckFailedException':
        return ConflictError(f"Conditional check failed - {full_message}", resource_id, original_error=error)

    elif error_code in ['ResourceNotFoundException', 'TableNotFoundException']:
        return NotFoundError(f"Table not found - {full_message}", 'table', table_name, original_error=error)

    elif error_code == 'ResourceInUseException':
        return ConflictError(f"Resource in use - {full_message}", resource_id or table_name, original_error=error)

    elif error_code == 'TableAlreadyExistsException':
        return ConflictError(f"Resource already exists - {full_message}", resource_id or table_name, original_error=error)

    elif error_code == 'ValidationException':
        return ValidationError(f"Validation failed - {full_message}", original_error=error)

    elif error_code == 'LimitExceededException':
        # Too many concurrent control-plane operations; clears on its own
        return RetryableError(f"DynamoDB limit exceeded - {full_message}", original_error=error)

    elif error_code in ['ProvisionedThroughputExceededException', 'RequestLimitExceeded']:
        return RetryableError(f"Throttling - {full_message}", original_error=error)

    elif error_code in [
        'ThrottlingException', 'TooManyRequestsException', 'RequestThrottledException'
    ]:
        return RetryableError(f"Throttling/rate limiting - {full_message}", original_error=error)

    elif error_code in [
        'InternalServerError', 'ServiceUnavailable', 'ServiceUnavailableException', 'InternalFailure'
    ]:
        return RetryableError(f"Service unavailable - {full_message}", original_error=error)

    elif error_code in ['RequestTimeoutException', 'RequestExpiredException']:
        return RetryableError(f"Request timeout - {full_message}", original_error=error)

    elif error_code in ['UnrecognizedClientException', 'AccessDeniedException']:
        return ConnectionError(f"Authentication/authorization failed - {full_message}", original_error=error)

    elif error_code in ['ExpiredTokenException', 'TokenRefreshRequiredException']:
        return ConnectionError(f"Token expired - {full_message}", original_error=error)

    elif error_code in ['InvalidEndpointException', 'IncompleteSignatureException', 'InvalidSignatureException']:
        return ConnectionError(f"Invalid endpoint or signature - {full_message}", original_error=error)

    # Default to ConnectionError for unknown errors
    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to ConnectionError")
    return ConnectionError(f"DynamoDB operation failed - {full_message}", original_error=error)


def create_dynamodb_resource(config: DynamoDBConfig):
    """Build a boto3 DynamoDB service resource from configuration.

    Credentials left unset in the config are resolved by boto3's default
    chain (environment, ~/.aws/credentials, instance profile).

    Raises:
        ConnectionError: If the session or resource cannot be created
    """
    try:
        session = boto3.Session(
            aws_access_key_id=config.aws_access_key_id,
            aws_secret_access_key=config.aws_secret_access_key,
            region_name=config.region_name
        )

        # Configure connection parameters
        dynamodb_config = {
            'region_name': config.region_name
        }

        if config.endpoint_url:
            dynamodb_config['endpoint_url'] = config.endpoint_url

        # Add retry and timeout configuration
        boto_config = Config(
            retries={'max_attempts': config.retries},
            max_pool_connections=config.max_pool_connections,
            read_timeout=config.timeout_seconds,
            connect_timeout=config.timeout_seconds
        )
        dynamodb_config['config'] = boto_config

        return session.resource('dynamodb', **dynamodb_config)
    except Exception as e:
        logger.error(f"Failed to create DynamoDB resource: {e}")
        raise ConnectionError(f"Failed to connect to DynamoDB: {e}", e) from e


class TableGateway:
    """
    Thin gateway for one DynamoDB table.

    Exposes the item and table calls the sample needs, each a direct
    pass-through to boto3 with error mapping and logging.
    """

    def __init__(self, config: DynamoDBConfig, table_name: str, dynamodb=None):
        """Initialize table gateway.

        Args:
            config: DynamoDB configuration
            table_name: Name of the DynamoDB table
            dynamodb: Optional boto3 DynamoDB resource to use instead of
                building one from ``config``
        """
        self.config = config
        self.table_name = table_name
        self._dynamodb = dynamodb
        self._table = None

    @property
    def dynamodb(self):
        """boto3 DynamoDB resource, built from config on first use if not injected."""
        if self._dynamodb is None:
            self._dynamodb = create_dynamodb_resource(self.config)
        return self._dynamodb

    @property
    def client(self):
        """Low-level DynamoDB client sharing the resource's connection."""
        return self.dynamodb.meta.client

    @property
    def table(self):
        """boto3 Table resource for item operations."""
        if self._table is None:
            try:
                self._table = self.dynamodb.Table(self.table_name)
            except Exception as e:
                logger.error(f"Failed to access table '{self.table_name}': {e}")
                raise ConnectionError(f"Failed to access table '{self.table_name}': {e}", e) from e
        return self._table

    # -------------------------------------------------------------------------
    # Item operations
    # -------------------------------------------------------------------------

    def put_item(self, item: Dict[str, Any]) -> None:
        """
        Put item into the table.

        This is an unconditional upsert that replaces any item stored under
        the same key.
        """
        try:
            self.table.put_item(Item=item)
            logger.info(f"Put item in {self.table_name}: {item}")
        except ClientError as e:
            raise map_dynamodb_error(e, "PutItem", self.table_name, str(item)) from e

    def get_item(self, key: Dict[str, Any], consistent_read: bool = False) -> Optional[Dict[str, Any]]:
        """
        Get item by primary key.

        Args:
            key: Primary key of the item
            consistent_read: Request a strongly consistent read

        Returns:
            The item, or None when no item is stored under ``key``
        """
        try:
            response = self.table.get_item(Key=key, ConsistentRead=consistent_read)
        except ClientError as e:
            raise map_dynamodb_error(e, "GetItem", self.table_name, str(key)) from e

        item = response.get('Item')
        logger.debug(f"Get item from {self.table_name}: {key} -> {'hit' if item else 'miss'}")
        return item

    def delete_item(self, key: Dict[str, Any]) -> None:
        """
        Delete item from the table.

        Deleting a key with no stored item succeeds without effect.
        """
        try:
            self.table.delete_item(Key=key)
            logger.info(f"Deleted item from {self.table_name}: {key}")
        except ClientError as e:
            raise map_dynamodb_error(e, "DeleteItem", self.table_name, str(key)) from e

    # -------------------------------------------------------------------------
    # Table operations
    # -------------------------------------------------------------------------

    def create_table(
        self,
        key_schema: List[Dict[str, str]],
        attribute_definitions: List[Dict[str, str]],
        provisioned_throughput: Dict[str, int]
    ) -> Dict[str, Any]:
        """
        Submit CreateTable for this gateway's table.

        Returns:
            The ``TableDescription`` from the response
        """
        try:
            response = self.client.create_table(
                TableName=self.table_name,
                KeySchema=key_schema,
                AttributeDefinitions=attribute_definitions,
                ProvisionedThroughput=provisioned_throughput
            )
            logger.info(f"CreateTable submitted for {self.table_name}")
            return response['TableDescription']
        except ClientError as e:
            raise map_dynamodb_error(e, "CreateTable", self.table_name) from e

    def describe_table(self) -> Dict[str, Any]:
        """
        Describe this gateway's table.

        Returns:
            The ``Table`` member of the DescribeTable response

        Raises:
            NotFoundError: If the table does not exist
        """
        try:
            return self.client.describe_table(TableName=self.table_name)['Table']
        except ClientError as e:
            raise map_dynamodb_error(e, "DescribeTable", self.table_name) from e

    def update_table(self, provisioned_throughput: Dict[str, int]) -> Dict[str, Any]:
        """
        Submit UpdateTable with new provisioned throughput.

        Returns:
            The ``TableDescription`` from the response
        """
        try:
            response = self.client.update_table(
                TableName=self.table_name,
                ProvisionedThroughput=provisioned_throughput
            )
            logger.info(f"UpdateTable submitted for {self.table_name}: {provisioned_throughput}")
            return response['TableDescription']
        except ClientError as e:
            raise map_dynamodb_error(e, "UpdateTable", self.table_name) from e

    def delete_table(self) -> Dict[str, Any]:
        """
        Submit DeleteTable for this gateway's table.

        Returns:
            The ``TableDescription`` from the response
        """
        try:
            response = self.client.delete_table(TableName=self.table_name)
            logger.info(f"DeleteTable submitted for {self.table_name}")
            return response['TableDescription']
        except ClientError as e:
            raise map_dynamodb_error(e, "DeleteTable", self.table_name) from e


def create_table_gateway(config: DynamoDBConfig, table_name: str, dynamodb=None) -> TableGateway:
    """
    Factory function to create a TableGateway instance.

    Args:
        config: DynamoDB configuration
        table_name: Base table name (prefix/environment applied from config)
        dynamodb: Optional boto3 DynamoDB resource to share

    Returns:
        Configured TableGateway instance
    """
    # Use config to get properly prefixed table name
    full_table_name = config.get_table_name(table_name)
    return TableGateway(config, full_table_name, dynamodb)
