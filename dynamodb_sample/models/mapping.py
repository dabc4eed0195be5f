"""
Declared attribute mapping between models and DynamoDB items.

A mapping lists, for every model field, the stored attribute name and its
DynamoDB scalar type. It is built once and checked when constructed, so a
typo in a field name or a missing hash key fails at import time instead of
on the first request.

Example:
    PERSON_MAPPING = ItemMapping(
        model=Person,
        table_name="Person",
        hash_key="id",
        attributes=[
            AttributeSpec(field="id", attribute="id", attribute_type="N"),
            AttributeSpec(field="name", attribute="name", attribute_type="S"),
        ],
    )
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Literal, Sequence, Type

from pydantic import BaseModel, ConfigDict

from ..exceptions import ValidationError
from .domain_models import Person

logger = logging.getLogger(__name__)


class AttributeSpec(BaseModel):
    """One row of the mapping table: field name -> stored attribute name -> type."""

    field: str
    attribute: str
    attribute_type: Literal['S', 'N', 'B']

    model_config = ConfigDict(frozen=True)


class ItemMapping:
    """Explicit model <-> item mapping for a single table."""

    def __init__(
        self,
        model: Type[BaseModel],
        table_name: str,
        hash_key: str,
        attributes: Sequence[AttributeSpec],
    ):
        """Create and validate the mapping.

        Args:
            model: Pydantic model class stored in the table
            table_name: Base table name (before prefix/environment)
            hash_key: Model field used as the partition key
            attributes: One AttributeSpec per model field

        Raises:
            ValidationError: If the declaration is inconsistent with the model
        """
        self.model = model
        self.table_name = table_name
        self.hash_key = hash_key
        self.attributes = tuple(attributes)
        self._validate()
        self._by_field = {spec.field: spec for spec in self.attributes}
        self._by_attribute = {spec.attribute: spec for spec in self.attributes}

    def _validate(self) -> None:
        errors: Dict[str, Any] = {}
        model_fields = set(self.model.model_fields)
        fields = [spec.field for spec in self.attributes]
        attribute_names = [spec.attribute for spec in self.attributes]

        unknown = sorted(set(fields) - model_fields)
        if unknown:
            errors['unknown_fields'] = unknown
        unmapped = sorted(model_fields - set(fields))
        if unmapped:
            errors['unmapped_fields'] = unmapped
        duplicate_fields = sorted({f for f in fields if fields.count(f) > 1})
        if duplicate_fields:
            errors['duplicate_fields'] = duplicate_fields
        duplicate_attributes = sorted({a for a in attribute_names if attribute_names.count(a) > 1})
        if duplicate_attributes:
            errors['duplicate_attributes'] = duplicate_attributes
        if self.hash_key not in fields:
            errors['hash_key'] = self.hash_key
        if not self.table_name:
            errors['table_name'] = 'required'

        if errors:
            raise ValidationError(
                f"Invalid attribute mapping for {self.model.__name__}",
                errors=errors
            )

    @property
    def hash_key_spec(self) -> AttributeSpec:
        return self._by_field[self.hash_key]

    def key_schema(self) -> List[Dict[str, str]]:
        """KeySchema argument for CreateTable."""
        return [{'AttributeName': self.hash_key_spec.attribute, 'KeyType': 'HASH'}]

    def attribute_definitions(self) -> List[Dict[str, str]]:
        """AttributeDefinitions argument for CreateTable.

        Only key attributes are declared; DynamoDB is schemaless for the rest.
        """
        spec = self.hash_key_spec
        return [{'AttributeName': spec.attribute, 'AttributeType': spec.attribute_type}]

    def key_for(self, value: Any) -> Dict[str, Any]:
        """Primary key dict for a hash key value."""
        return {self.hash_key_spec.attribute: value}

    def key_of(self, record: BaseModel) -> Dict[str, Any]:
        return self.key_for(getattr(record, self.hash_key))

    def to_item(self, record: BaseModel) -> Dict[str, Any]:
        """Convert a model instance to a DynamoDB item."""
        if not isinstance(record, self.model):
            raise ValidationError(
                f"Expected {self.model.__name__}, got {type(record).__name__}"
            )

        item = {}
        for field_name, value in record.model_dump(exclude_none=True).items():
            spec = self._by_field[field_name]
            if spec.attribute_type == 'N' and isinstance(value, float):
                # boto3 rejects floats for Number attributes
                value = Decimal(str(value))
            item[spec.attribute] = value
        return item

    def from_item(self, item: Dict[str, Any]) -> BaseModel:
        """Create a model instance from a DynamoDB item.

        Attributes not declared in the mapping are ignored.
        """
        data = {}
        for attribute, value in item.items():
            spec = self._by_attribute.get(attribute)
            if spec is None:
                logger.debug(f"Ignoring unmapped attribute '{attribute}' in {self.table_name}")
                continue
            if spec.attribute_type == 'N' and isinstance(value, Decimal):
                # Number attributes come back as Decimal
                value = int(value) if value == value.to_integral_value() else value
            data[spec.field] = value

        try:
            return self.model(**data)
        except Exception as e:
            logger.error(f"Failed to convert DynamoDB item to {self.model.__name__}: {e}")
            raise ValidationError(f"Failed to convert DynamoDB item to {self.model.__name__}: {e}") from e


PERSON_MAPPING = ItemMapping(
    model=Person,
    table_name="Person",
    hash_key="id",
    attributes=[
        AttributeSpec(field="id", attribute="id", attribute_type="N"),
        AttributeSpec(field="name", attribute="name", attribute_type="S"),
        AttributeSpec(field="age", attribute="age", attribute_type="N"),
    ],
)
