"""
Core infrastructure components for DynamoDB operations.

- create_dynamodb_resource: boto3 resource factory
- TableGateway: Thin wrapper over boto3 DynamoDB operations for one table
- Bounded status waiters for table lifecycle calls
"""

from .table_gateway import (
    TableGateway,
    create_dynamodb_resource,
    create_table_gateway,
    map_dynamodb_error,
)
from .waiter import WaitPolicy, wait_for_table_status, wait_until_active, wait_until_deleted

__all__ = [
    "TableGateway",
    "create_dynamodb_resource",
    "create_table_gateway",
    "map_dynamodb_error",
    "WaitPolicy",
    "wait_for_table_status",
    "wait_until_active",
    "wait_until_deleted",
]
