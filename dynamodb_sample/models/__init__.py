# Core domain models
from .domain_models import (
    # Person Domain
    Person,

    # Table Domain
    ProvisionedThroughput,
    AttributeDefinition,
    TableInfo,
)

# Declared attribute mapping
from .mapping import (
    AttributeSpec,
    ItemMapping,
    PERSON_MAPPING,
)

from .results import StepResult

__all__ = [
    "Person",
    "ProvisionedThroughput",
    "AttributeDefinition",
    "TableInfo",
    "AttributeSpec",
    "ItemMapping",
    "PERSON_MAPPING",
    "StepResult",
]
