"""
Handler Layer for the DynamoDB sample

Each domain has its own subdirectory with queries.py (read) and
commands.py (write):
- person: record CRUD
- tables: table lifecycle and enumeration

handlers/ (this layer) -> core/ (infrastructure) -> DynamoDB
"""

from .person.queries import PersonReadApi
from .person.commands import PersonWriteApi
from .tables.queries import TableReadApi, format_table_info
from .tables.commands import TableAdminApi

__all__ = [
    'PersonReadApi',
    'PersonWriteApi',
    'TableReadApi',
    'TableAdminApi',
    'format_table_info',
]
