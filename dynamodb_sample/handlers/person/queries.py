"""
Person Read API

Key lookups for person records. A missing record is a normal result and is
returned as None.
"""

import logging
from typing import Optional

from ...config import DynamoDBConfig
from ...core import create_table_gateway
from ...models import PERSON_MAPPING, ItemMapping, Person

logger = logging.getLogger(__name__)


class PersonReadApi:
    """Read-only API for person records."""

    def __init__(self, config: DynamoDBConfig, dynamodb=None, mapping: ItemMapping = PERSON_MAPPING):
        """Initialize read API with configuration and an optional shared resource."""
        self.config = config
        self.mapping = mapping
        self.gateway = create_table_gateway(config, mapping.table_name, dynamodb)

    def load(self, person_id: int, consistent_read: bool = False) -> Optional[Person]:
        """
        Load a person by id.

        DynamoDB Operation: GetItem with primary key

        Args:
            person_id: Hash key value
            consistent_read: True for a strongly consistent read, False for
                an eventually consistent one

        Returns:
            Person if stored, None otherwise
        """
        item = self.gateway.get_item(self.mapping.key_for(person_id), consistent_read=consistent_read)
        if item is None:
            logger.info(f"No person with id {person_id} in {self.gateway.table_name}")
            return None
        return self.mapping.from_item(item)
