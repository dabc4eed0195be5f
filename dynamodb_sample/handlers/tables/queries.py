"""
Table Read API

Read-only table operations:
- describe_table() returns TableInfo built from DescribeTable
- list_tables() lazily yields every table name visible to the credentials
"""

import logging
from typing import Iterator, List

from botocore.exceptions import ClientError

from ...config import DynamoDBConfig
from ...core import create_dynamodb_resource, create_table_gateway, map_dynamodb_error
from ...models import TableInfo

logger = logging.getLogger(__name__)


class TableReadApi:
    """Read-only API for table metadata."""

    def __init__(self, config: DynamoDBConfig, dynamodb=None):
        self.config = config
        self.dynamodb = dynamodb if dynamodb is not None else create_dynamodb_resource(config)

    def describe_table(self, table_name: str) -> TableInfo:
        """
        Describe a table.

        Args:
            table_name: Base table name (prefix/environment applied from config)

        Raises:
            NotFoundError: If the table does not exist
        """
        gateway = create_table_gateway(self.config, table_name, self.dynamodb)
        return TableInfo.from_description(gateway.describe_table())

    def list_tables(self) -> Iterator[str]:
        """
        Lazily yield table names.

        Nothing is requested until iteration starts; calling again starts a
        fresh listing.
        """
        try:
            for table in self.dynamodb.tables.all():
                yield table.name
        except ClientError as e:
            raise map_dynamodb_error(e, "ListTables", "*") from e


def format_table_info(info: TableInfo) -> List[str]:
    """Render table metadata as console lines."""
    lines = [
        f"Table name  : {info.table_name}",
        f"Table ARN   : {info.table_arn}",
        f"Status      : {info.table_status}",
        f"Item count  : {info.item_count}",
        f"Size (bytes): {info.table_size_bytes}",
    ]
    if info.throughput is not None:
        lines.extend([
            "Throughput",
            f"  Read Capacity : {info.throughput.read_capacity_units}",
            f"  Write Capacity: {info.throughput.write_capacity_units}",
        ])
    lines.append("Attributes")
    lines.extend(f"  {attr.name} ({attr.type})" for attr in info.attributes)
    return lines
