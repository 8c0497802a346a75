"""Keyset pagination implementing the Relay cursor connection contract."""

from .cursor import Key, encode_cursor, decode_cursor
from .request import (
    DirectionKind,
    PaginationDirection,
    PaginationRequest,
    PaginationArgs,
    validate_pagination
)
from .planner import (
    MAX_LIMIT,
    PAGE_EXTRA,
    SortOrder,
    KeyCondition,
    SliceContext,
    QueryPlan,
    plan_query
)
from .slicer import Page, field_key, slice_results
from .connection import Edge, PageInfo, Connection, build_connection, create_link_header
from .paginator import QueryExecutor, paginate

__all__ = [
    "Key",
    "encode_cursor",
    "decode_cursor",
    "DirectionKind",
    "PaginationDirection",
    "PaginationRequest",
    "PaginationArgs",
    "validate_pagination",
    "MAX_LIMIT",
    "PAGE_EXTRA",
    "SortOrder",
    "KeyCondition",
    "SliceContext",
    "QueryPlan",
    "plan_query",
    "Page",
    "field_key",
    "slice_results",
    "Edge",
    "PageInfo",
    "Connection",
    "build_connection",
    "create_link_header",
    "QueryExecutor",
    "paginate"
]
