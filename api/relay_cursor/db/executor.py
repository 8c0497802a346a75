"""Query executors that serve range queries for the pagination engine."""

import logging
import operator
import re
from typing import Any, Callable, Iterable, List, Optional, Sequence

import asyncpg
from asyncpg import Pool

from ..errors.problem_details import InternalServerError, ServiceUnavailableError
from ..pagination.paginator import QueryExecutor
from ..pagination.planner import KeyCondition, SortOrder
from ..pagination.slicer import field_key

logger = logging.getLogger(__name__)

_OPERATORS = {"<=": operator.le, ">=": operator.ge}
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class MemoryExecutor:
    """Executor over an in-memory collection of mappings or objects."""

    def __init__(self, items: Iterable[Any] = (), key: Optional[Callable[[Any], Any]] = None):
        self.items: List[Any] = list(items)
        self._key = key

    def add(self, item: Any) -> None:
        self.items.append(item)

    def remove(self, key_value: Any, key_field: str = "id") -> bool:
        """Remove the item with the given key, returning whether it existed."""
        key = self._key or field_key(key_field)
        for i, item in enumerate(self.items):
            if key(item) == key_value:
                del self.items[i]
                return True
        return False

    async def fetch(
        self,
        key_field: str,
        conditions: Sequence[KeyCondition],
        sort_order: SortOrder,
        limit: int
    ) -> List[Any]:
        key = self._key or field_key(key_field)
        matching = [
            item for item in self.items
            if all(_OPERATORS[c.operator](key(item), c.value) for c in conditions)
        ]
        matching.sort(key=key, reverse=sort_order is SortOrder.DESC)
        return matching[:limit]


def quote_identifier(name: str) -> str:
    """Quote a table or column name, rejecting anything but plain identifiers."""
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid SQL identifier: {name!r}")
    return f'"{name}"'


def build_where_clause(conditions: Sequence[KeyCondition]) -> tuple[str, List[Any]]:
    """Build a parameterized WHERE clause from key conditions.

    Args:
        conditions: Bounds to combine with AND

    Returns:
        Tuple of (where_clause, parameters); the clause is empty when
        there are no conditions
    """
    clauses = []
    params = []
    for condition in conditions:
        params.append(condition.value)
        clauses.append(f"{quote_identifier(condition.field)} {condition.operator} ${len(params)}")

    if not clauses:
        return "", params
    return "WHERE " + " AND ".join(clauses), params


def build_order_clause(key_field: str, sort_order: SortOrder) -> str:
    """Build the ORDER BY clause for a key field."""
    direction = "DESC" if sort_order is SortOrder.DESC else "ASC"
    return f"ORDER BY {quote_identifier(key_field)} {direction}"


class PostgresExecutor:
    """Executor that runs range queries against a PostgreSQL table."""

    def __init__(self, pool: Pool, table: str, columns: Sequence[str] = ("*",)):
        self.pool = pool
        self.table = table
        self.columns = columns

    def build_query(
        self,
        key_field: str,
        conditions: Sequence[KeyCondition],
        sort_order: SortOrder,
        limit: int
    ) -> tuple[str, List[Any]]:
        """Render the SELECT statement and its parameters."""
        where_clause, params = build_where_clause(conditions)
        order_clause = build_order_clause(key_field, sort_order)
        columns = ", ".join(c if c == "*" else quote_identifier(c) for c in self.columns)
        params.append(limit)

        query = " ".join(part for part in (
            f"SELECT {columns} FROM {quote_identifier(self.table)}",
            where_clause,
            order_clause,
            f"LIMIT ${len(params)}"
        ) if part)
        return query, params

    async def fetch(
        self,
        key_field: str,
        conditions: Sequence[KeyCondition],
        sort_order: SortOrder,
        limit: int
    ) -> List[dict]:
        query, params = self.build_query(key_field, conditions, sort_order, limit)
        logger.debug(f"Executing range query: {query}")

        try:
            async with self.pool.acquire() as conn:
                rows = await conn.fetch(query, *params)
        except (OSError, asyncpg.InterfaceError) as e:
            logger.error(f"Database unavailable while querying {self.table}: {e}")
            raise ServiceUnavailableError("Database connection failed")
        except asyncpg.PostgresError as e:
            logger.error(f"Database error querying {self.table}: {e}")
            raise InternalServerError(f"Database error: {e}")

        return [dict(row) for row in rows]
