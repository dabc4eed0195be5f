"""
Table APIs

Read API:
- describe_table() metadata as TableInfo
- list_tables() lazy name listing

Admin API:
- create/update/delete with bounded waits on table status
"""

from .queries import TableReadApi, format_table_info
from .commands import TableAdminApi

__all__ = [
    "TableReadApi",
    "TableAdminApi",
    "format_table_info",
]
