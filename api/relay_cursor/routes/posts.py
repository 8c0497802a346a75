"""Posts API endpoints."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Request, Response

from ..config import get_settings
from ..db.connection import get_db_pool
from ..db.executor import PostgresExecutor
from ..models.posts import Post, PostConnection, POST_COLUMNS
from ..pagination import MAX_LIMIT, QueryExecutor, PaginationArgs, create_link_header, paginate


logger = logging.getLogger(__name__)

posts_router = APIRouter(
    prefix="/posts",
    tags=["Posts"],
    responses={
        400: {"description": "Bad Request - Invalid pagination arguments"},
        503: {"description": "Service Unavailable"}
    }
)


async def get_posts_executor() -> QueryExecutor:
    """Executor serving range queries over the posts table."""
    pool = await get_db_pool()
    return PostgresExecutor(pool, get_settings().posts_table, columns=POST_COLUMNS)


PostsExecutor = Annotated[QueryExecutor, Depends(get_posts_executor)]


@posts_router.get(
    "",
    response_model=PostConnection,
    summary="List posts",
    description="List posts newest first as a Relay cursor connection.",
    responses={
        200: {"description": "Posts retrieved successfully"}
    }
)
async def list_posts(
    executor: PostsExecutor,
    request: Request,
    response: Response,
    after: Annotated[Optional[str], Query(description="Return posts after this cursor")] = None,
    before: Annotated[Optional[str], Query(description="Return posts before this cursor")] = None,
    first: Annotated[Optional[int], Query(description="Number of posts from the start of the window")] = None,
    last: Annotated[Optional[int], Query(description="Number of posts from the end of the window")] = None
) -> PostConnection:
    """List posts with keyset pagination.

    Posts are returned in descending key order, which is creation order
    since keys are ULIDs. ``first`` and ``last`` are mutually exclusive and
    both are clamped to the maximum page size. Cursors are inclusive
    bounds and may refer to posts that have since been deleted.

    Args:
        executor: Range query executor for the posts table
        request: FastAPI request object
        response: FastAPI response object for adding headers
        after: Cursor of the post to continue after
        before: Cursor of the post to continue before
        first: Page size counted forward
        last: Page size counted backward

    Returns:
        Connection of posts with a Link header to neighbouring pages
    """
    args = PaginationArgs(after=after, before=before, first=first, last=last)
    key_field = get_settings().posts_key_field
    logger.info(f"Listing posts with {args.model_dump(exclude_none=True)}")

    connection = await paginate(executor, args, key_field=key_field)

    page_size = min(first if first is not None else last if last is not None else MAX_LIMIT, MAX_LIMIT)
    link_header = create_link_header(
        base_url=str(request.url).split("?")[0],
        connection=connection,
        page_size=page_size
    )
    if link_header:
        response.headers["Link"] = link_header

    logger.info(f"Retrieved {len(connection.edges)} posts")
    return PostConnection(
        edges=[
            {"cursor": edge.cursor, "node": Post.model_validate(edge.node)}
            for edge in connection.edges
        ],
        page_info=connection.page_info
    )


__all__ = ["posts_router", "get_posts_executor"]
