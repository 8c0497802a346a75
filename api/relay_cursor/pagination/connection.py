"""Relay connection response models and their assembly from a page."""

from typing import Generic, List, Optional, TypeVar
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .cursor import encode_cursor
from .slicer import KeyFunc, Page, field_key

T = TypeVar("T")

_relay_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageInfo(BaseModel):
    """Relay pageInfo object."""

    has_previous_page: bool = Field(description="Whether items precede the first edge")
    has_next_page: bool = Field(description="Whether items follow the last edge")
    start_cursor: Optional[str] = Field(default=None, description="Cursor of the first edge")
    end_cursor: Optional[str] = Field(default=None, description="Cursor of the last edge")

    model_config = _relay_config


class Edge(BaseModel, Generic[T]):
    """A node together with the cursor that points at it."""

    cursor: str
    node: T

    model_config = _relay_config


class Connection(BaseModel, Generic[T]):
    """Relay connection: edges in canonical order plus page info."""

    edges: List[Edge[T]] = Field(default_factory=list)
    page_info: PageInfo

    model_config = _relay_config

    @property
    def nodes(self) -> List[T]:
        return [edge.node for edge in self.edges]


def build_connection(page: Page[T], key: KeyFunc = field_key()) -> Connection[T]:
    """Pair every item of ``page`` with its cursor, keeping slicer order."""
    edges = [{"cursor": encode_cursor(key(item)), "node": item} for item in page.items]
    return Connection(
        edges=edges,
        page_info=PageInfo(
            has_previous_page=page.has_previous_page,
            has_next_page=page.has_next_page,
            start_cursor=edges[0]["cursor"] if edges else None,
            end_cursor=edges[-1]["cursor"] if edges else None
        )
    )


def create_link_header(
    base_url: str,
    connection: Connection,
    page_size: int
) -> Optional[str]:
    """Create a Link header (RFC 8288) for the pages next to ``connection``.

    Args:
        base_url: Resource URL without query string
        connection: The connection being returned
        page_size: Page size to request on the linked pages

    Returns:
        Link header value or None if there is nothing to link to
    """
    links = []
    info = connection.page_info

    if info.has_next_page and info.end_cursor:
        query = urlencode({"after": info.end_cursor, "first": page_size})
        links.append(f'<{base_url}?{query}>; rel="next"')

    if info.has_previous_page and info.start_cursor:
        query = urlencode({"before": info.start_cursor, "last": page_size})
        links.append(f'<{base_url}?{query}>; rel="prev"')

    return ", ".join(links) if links else None
