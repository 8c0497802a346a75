"""Tests for connection assembly and Link headers."""

from relay_cursor.pagination.connection import (
    Connection,
    PageInfo,
    build_connection,
    create_link_header
)
from relay_cursor.pagination.cursor import decode_cursor, encode_cursor
from relay_cursor.pagination.slicer import Page, field_key


class TestBuildConnection:
    """Test build_connection."""

    def test_edges_follow_page_order(self):
        page = Page(items=[{"id": "c"}, {"id": "b"}, {"id": "a"}], has_previous_page=True)
        connection = build_connection(page)

        assert [edge.node["id"] for edge in connection.edges] == ["c", "b", "a"]
        assert [decode_cursor(edge.cursor) for edge in connection.edges] == ["c", "b", "a"]
        assert connection.nodes == page.items

    def test_page_info(self):
        page = Page(items=[{"id": "c"}, {"id": "b"}], has_previous_page=True, has_next_page=False)
        info = build_connection(page).page_info

        assert info.has_previous_page is True
        assert info.has_next_page is False
        assert info.start_cursor == encode_cursor("c")
        assert info.end_cursor == encode_cursor("b")

    def test_empty_page(self):
        connection = build_connection(Page(items=[]))

        assert connection.edges == []
        assert connection.page_info.start_cursor is None
        assert connection.page_info.end_cursor is None

    def test_custom_key(self):
        page = Page(items=[{"slug": "first-post"}])
        connection = build_connection(page, key=field_key("slug"))

        assert connection.edges[0].cursor == encode_cursor("first-post")

    def test_relay_field_names(self):
        page = Page(items=[{"id": "a"}], has_next_page=True)
        data = build_connection(page).model_dump(by_alias=True)

        assert set(data) == {"edges", "pageInfo"}
        assert data["edges"][0] == {"cursor": encode_cursor("a"), "node": {"id": "a"}}
        assert data["pageInfo"] == {
            "hasPreviousPage": False,
            "hasNextPage": True,
            "startCursor": encode_cursor("a"),
            "endCursor": encode_cursor("a")
        }


class TestCreateLinkHeader:
    """Test create_link_header."""

    def _connection(self, has_previous: bool, has_next: bool) -> Connection:
        return Connection(
            edges=[],
            page_info=PageInfo(
                has_previous_page=has_previous,
                has_next_page=has_next,
                start_cursor="START",
                end_cursor="END"
            )
        )

    def test_next_and_prev(self):
        header = create_link_header("http://test/v1/posts", self._connection(True, True), 3)

        assert header == (
            '<http://test/v1/posts?after=END&first=3>; rel="next", '
            '<http://test/v1/posts?before=START&last=3>; rel="prev"'
        )

    def test_next_only(self):
        header = create_link_header("http://test/v1/posts", self._connection(False, True), 3)

        assert header == '<http://test/v1/posts?after=END&first=3>; rel="next"'

    def test_no_links(self):
        assert create_link_header("http://test/v1/posts", self._connection(False, False), 3) is None

    def test_empty_page_has_no_links(self):
        connection = build_connection(Page(items=[], has_next_page=True))

        assert create_link_header("http://test/v1/posts", connection, 3) is None
