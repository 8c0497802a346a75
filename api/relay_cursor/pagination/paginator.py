"""End-to-end keyset pagination: validate, plan, fetch, slice, assemble."""

import logging
from typing import Any, Optional, Protocol, Sequence, Union

from .connection import Connection, build_connection
from .planner import KeyCondition, SortOrder, plan_query
from .request import PaginationArgs, PaginationRequest
from .slicer import KeyFunc, field_key, slice_results

logger = logging.getLogger(__name__)


class QueryExecutor(Protocol):
    """Anything that can run one ordered, bounded range query.

    Rows must match every condition, be ordered by ``key_field`` in
    ``sort_order`` and number at most ``limit``. Keys must be unique, or
    sentinel detection stops working.
    """

    async def fetch(
        self,
        key_field: str,
        conditions: Sequence[KeyCondition],
        sort_order: SortOrder,
        limit: int
    ) -> Sequence[Any]:
        ...


async def paginate(
    executor: QueryExecutor,
    args: Union[PaginationArgs, PaginationRequest],
    key_field: str = "id",
    key: Optional[KeyFunc] = None,
    canonical_order: SortOrder = SortOrder.DESC
) -> Connection:
    """Fetch one page of a collection as a Relay connection.

    Raw arguments are validated before the executor is touched, so an
    invalid request never issues a query. Executor errors propagate
    unchanged.

    Args:
        executor: Runs the single range query for this page
        args: Raw connection arguments or an already validated request
        key_field: Name of the unique key field
        key: Accessor for an item's key, defaults to reading ``key_field``
        canonical_order: Order pages are presented in

    Returns:
        Connection with edges in canonical order

    Raises:
        PaginationInvalidError: If the arguments are invalid
    """
    request = args.validate_request() if isinstance(args, PaginationArgs) else args
    key = key or field_key(key_field)

    plan = plan_query(request, key_field=key_field, canonical_order=canonical_order)
    rows = await executor.fetch(plan.key_field, plan.conditions, plan.sort_order, plan.query_limit)

    page = slice_results(rows, plan.slice_context, key=key)
    logger.debug(
        f"Fetched {len(rows)} rows, returning {len(page.items)} "
        f"(previous={page.has_previous_page}, next={page.has_next_page})"
    )
    return build_connection(page, key=key)
