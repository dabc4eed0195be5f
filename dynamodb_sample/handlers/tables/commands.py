"""
Table Admin API

Table lifecycle mutations. Every call submits the request and then waits,
within the configured poll budget, for DynamoDB to finish:
- create_table() -> ACTIVE
- update_throughput() -> ACTIVE, then re-describes the table
- delete_table() -> table gone

Errors are not swallowed here; they surface as the sample's exceptions
(ConflictError, NotFoundError, WaitTimeoutError, ...) for the caller to act on.
"""

import logging
import threading
from typing import Dict, List, Optional

from ...config import DynamoDBConfig
from ...core import (
    WaitPolicy,
    create_dynamodb_resource,
    create_table_gateway,
    wait_until_active,
    wait_until_deleted,
)
from ...models import ItemMapping, ProvisionedThroughput, TableInfo

logger = logging.getLogger(__name__)


class TableAdminApi:
    """Write API for table lifecycle operations."""

    def __init__(
        self,
        config: DynamoDBConfig,
        dynamodb=None,
        policy: Optional[WaitPolicy] = None,
        cancel_event: Optional[threading.Event] = None
    ):
        """Initialize admin API.

        Args:
            config: DynamoDB configuration
            dynamodb: Optional shared boto3 DynamoDB resource
            policy: Poll budget for status waits (defaults from config)
            cancel_event: Event that aborts any wait in progress when set
        """
        self.config = config
        self.dynamodb = dynamodb if dynamodb is not None else create_dynamodb_resource(config)
        self.policy = policy or WaitPolicy.from_config(config)
        self.cancel_event = cancel_event

    def create_table(
        self,
        table_name: str,
        key_schema: List[Dict[str, str]],
        attribute_definitions: List[Dict[str, str]],
        throughput: ProvisionedThroughput
    ) -> TableInfo:
        """
        Create a provisioned table and wait until it is ACTIVE.

        Raises:
            ConflictError: If the table already exists
            WaitTimeoutError: If it does not become ACTIVE in time
        """
        gateway = create_table_gateway(self.config, table_name, self.dynamodb)
        gateway.create_table(key_schema, attribute_definitions, throughput.to_request())

        logger.info(f"Waiting for table {gateway.table_name} to be created")
        wait_until_active(gateway, self.policy, self.cancel_event)
        logger.info(f"Table {gateway.table_name} created")
        return TableInfo.from_description(gateway.describe_table())

    def create_table_for(self, mapping: ItemMapping, throughput: ProvisionedThroughput) -> TableInfo:
        """Create the table declared by an attribute mapping."""
        return self.create_table(
            mapping.table_name,
            mapping.key_schema(),
            mapping.attribute_definitions(),
            throughput
        )

    def wait_for_active(self, table_name: str) -> str:
        """Wait until an existing table is ACTIVE."""
        gateway = create_table_gateway(self.config, table_name, self.dynamodb)
        return wait_until_active(gateway, self.policy, self.cancel_event)

    def update_throughput(self, table_name: str, throughput: ProvisionedThroughput) -> TableInfo:
        """
        Change provisioned throughput, wait until ACTIVE, and re-describe.

        Raises:
            NotFoundError: If the table does not exist
            ValidationError: If the capacity is rejected (e.g. unchanged values)
        """
        gateway = create_table_gateway(self.config, table_name, self.dynamodb)
        gateway.update_table(throughput.to_request())

        wait_until_active(gateway, self.policy, self.cancel_event)
        info = TableInfo.from_description(gateway.describe_table())
        logger.info(f"Table {gateway.table_name} throughput now {info.throughput}")
        return info

    def delete_table(self, table_name: str) -> None:
        """
        Delete a table and wait until it no longer exists.

        Raises:
            NotFoundError: If the table does not exist
        """
        gateway = create_table_gateway(self.config, table_name, self.dynamodb)
        gateway.delete_table()

        logger.info(f"Waiting for table {gateway.table_name} to be deleted")
        wait_until_deleted(gateway, self.policy, self.cancel_event)
        logger.info(f"Table {gateway.table_name} deleted")
