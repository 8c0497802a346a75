"""Database access and query executors."""

from .connection import DatabaseManager, db_manager, get_db_pool
from .executor import (
    QueryExecutor,
    MemoryExecutor,
    PostgresExecutor,
    build_where_clause,
    build_order_clause,
    quote_identifier
)

__all__ = [
    "DatabaseManager",
    "db_manager",
    "get_db_pool",
    "QueryExecutor",
    "MemoryExecutor",
    "PostgresExecutor",
    "build_where_clause",
    "build_order_clause",
    "quote_identifier"
]
