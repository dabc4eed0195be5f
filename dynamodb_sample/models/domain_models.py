"""
Domain Models for the DynamoDB sample

Organized by domain:
1. Person Domain - the single record type stored by the sample
2. Table Domain - provisioned throughput and DescribeTable metadata
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Person Domain
# =============================================================================

class Person(BaseModel):
    """One person record, keyed by ``id``."""

    id: int = Field(..., frozen=True, description="Hash key, immutable once assigned")
    name: str = Field(..., description="Display name")
    age: int = Field(..., description="Age in years")

    model_config = ConfigDict(validate_assignment=True)


# =============================================================================
# Table Domain
# =============================================================================

class ProvisionedThroughput(BaseModel):
    """Read/write capacity pair of a provisioned table."""

    read_capacity_units: int = Field(..., ge=1)
    write_capacity_units: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)

    def to_request(self) -> Dict[str, int]:
        """Render as the ``ProvisionedThroughput`` request parameter."""
        return {
            'ReadCapacityUnits': self.read_capacity_units,
            'WriteCapacityUnits': self.write_capacity_units,
        }


class AttributeDefinition(BaseModel):
    """Key attribute declared on a table."""

    name: str
    type: str

    model_config = ConfigDict(frozen=True)


class TableInfo(BaseModel):
    """Subset of DescribeTable output shown to the user."""

    table_name: str
    table_arn: Optional[str] = None
    table_status: str
    item_count: int = 0
    table_size_bytes: int = 0
    throughput: Optional[ProvisionedThroughput] = None
    attributes: List[AttributeDefinition] = Field(default_factory=list)

    @classmethod
    def from_description(cls, description: Dict[str, Any]) -> 'TableInfo':
        """Build from the ``Table`` member of a DescribeTable response."""
        throughput = None
        throughput_desc = description.get('ProvisionedThroughput')
        # On-demand tables report zero capacity
        if throughput_desc and throughput_desc.get('ReadCapacityUnits'):
            throughput = ProvisionedThroughput(
                read_capacity_units=int(throughput_desc['ReadCapacityUnits']),
                write_capacity_units=int(throughput_desc['WriteCapacityUnits']),
            )

        return cls(
            table_name=description['TableName'],
            table_arn=description.get('TableArn'),
            table_status=description['TableStatus'],
            item_count=int(description.get('ItemCount', 0)),
            table_size_bytes=int(description.get('TableSizeBytes', 0)),
            throughput=throughput,
            attributes=[
                AttributeDefinition(name=attr['AttributeName'], type=attr['AttributeType'])
                for attr in description.get('AttributeDefinitions', [])
            ],
        )
