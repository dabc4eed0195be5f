"""
Person Write API

Upsert and delete for person records. Saves are unconditional: the last
write for an id wins and no version check is made.
"""

import logging
from typing import Union

from ...config import DynamoDBConfig
from ...core import create_table_gateway
from ...models import PERSON_MAPPING, ItemMapping, Person

logger = logging.getLogger(__name__)


class PersonWriteApi:
    """Write-only API for person records."""

    def __init__(self, config: DynamoDBConfig, dynamodb=None, mapping: ItemMapping = PERSON_MAPPING):
        """Initialize write API with configuration and an optional shared resource."""
        self.config = config
        self.mapping = mapping
        self.gateway = create_table_gateway(config, mapping.table_name, dynamodb)

    def save(self, person: Person) -> Person:
        """
        Store a person, replacing any record with the same id.

        DynamoDB Operation: PutItem without ConditionExpression

        Returns:
            The saved person
        """
        item = self.mapping.to_item(person)
        self.gateway.put_item(item)
        logger.info(f"Saved person {person.id}")
        return person

    def delete(self, person: Union[Person, int]) -> None:
        """
        Delete a person by id.

        DynamoDB Operation: DeleteItem. Deleting an id with no stored record
        is not an error.

        Args:
            person: Person instance or its id
        """
        if isinstance(person, Person):
            key = self.mapping.key_of(person)
        else:
            key = self.mapping.key_for(person)
        self.gateway.delete_item(key)
        logger.info(f"Deleted person {key}")
