"""Turns a validated pagination request into a single range query plan."""

import logging
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .cursor import Key
from .request import PaginationRequest

logger = logging.getLogger(__name__)

MAX_LIMIT = 100
PAGE_EXTRA = 2


class SortOrder(str, Enum):
    """Sort order of a key field."""

    ASC = "asc"
    DESC = "desc"

    def reversed(self) -> "SortOrder":
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC


class KeyCondition(BaseModel):
    """A single inclusive bound on the key field."""

    field: str
    operator: Literal["<=", ">="]
    value: Key

    model_config = ConfigDict(frozen=True)


class SliceContext(BaseModel):
    """What the result slicer needs to know about the query that was planned."""

    reverse_results: bool = False
    limit: int = MAX_LIMIT
    after_key: Optional[Key] = None
    before_key: Optional[Key] = None

    model_config = ConfigDict(frozen=True)


class QueryPlan(BaseModel):
    """Range condition, sort order and overfetch limit for the executor."""

    key_field: str
    conditions: List[KeyCondition] = Field(default_factory=list, description="Combined with AND")
    sort_order: SortOrder
    query_limit: int
    slice_context: SliceContext

    model_config = ConfigDict(frozen=True)


def plan_query(
    request: PaginationRequest,
    key_field: str = "id",
    canonical_order: SortOrder = SortOrder.DESC
) -> QueryPlan:
    """Build the query plan for a pagination request.

    Cursors are inclusive bounds: the item a cursor points at is fetched
    again as a sentinel, which is how the slicer learns that items exist
    on the other side of it. A missing cursor bound is made up for by
    fetching ``PAGE_EXTRA`` rows beyond the page.

    ::

        |   0   | 1 | 2 | 3 | 4 | 5 | 6 | 7 | 8 |   9    |
        | after |             page              | before |

    Backward pages are fetched in reverse canonical order starting from
    ``before`` and flipped back by the slicer, so a page never needs more
    than ``limit + PAGE_EXTRA`` rows.

    Args:
        request: Validated pagination request
        key_field: Name of the unique, monotonic key field
        canonical_order: Collection-wide order that pages are presented in

    Returns:
        The plan to hand to a query executor
    """
    # after/before point into canonical order, so their operators flip with it
    if canonical_order is SortOrder.DESC:
        after_op, before_op = "<=", ">="
    else:
        after_op, before_op = ">=", "<="

    conditions = []
    if request.after is not None:
        conditions.append(KeyCondition(field=key_field, operator=after_op, value=request.after))
    if request.before is not None:
        conditions.append(KeyCondition(field=key_field, operator=before_op, value=request.before))

    backward = request.direction is not None and request.direction.is_backward
    sort_order = canonical_order.reversed() if backward else canonical_order

    # Oversized requests are silently clamped
    requested = request.direction.limit if request.direction is not None else MAX_LIMIT
    limit = min(requested, MAX_LIMIT)

    plan = QueryPlan(
        key_field=key_field,
        conditions=conditions,
        sort_order=sort_order,
        query_limit=limit + PAGE_EXTRA,
        slice_context=SliceContext(
            reverse_results=backward,
            limit=limit,
            after_key=request.after,
            before_key=request.before
        )
    )
    logger.debug(
        f"Planned {sort_order.value} query on '{key_field}' with {len(conditions)} "
        f"bound(s), limit {plan.query_limit}"
    )
    return plan
