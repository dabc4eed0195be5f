"""
Person record APIs

Read API:
- load() by id, with optional strongly consistent read

Write API:
- save() as unconditional upsert
- delete() by id, idempotent
"""

from .queries import PersonReadApi
from .commands import PersonWriteApi

__all__ = [
    "PersonReadApi",
    "PersonWriteApi",
]
