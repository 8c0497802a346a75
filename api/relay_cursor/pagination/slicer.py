"""Turns an overfetched, query-ordered batch of rows into one page."""

from collections.abc import Mapping
from typing import Any, Callable, Generic, List, Sequence, TypeVar

from pydantic import BaseModel

from .cursor import Key
from .planner import SliceContext

T = TypeVar("T")

KeyFunc = Callable[[Any], Key]


class Page(BaseModel, Generic[T]):
    """One page of items in canonical order with its boundary flags."""

    items: List[T]
    has_previous_page: bool = False
    has_next_page: bool = False


def field_key(key_field: str = "id") -> KeyFunc:
    """Return a key accessor for mapping rows or objects with a key attribute."""
    def key(item: Any) -> Key:
        if isinstance(item, Mapping):
            return item[key_field]
        return getattr(item, key_field)
    return key


def slice_results(
    rows: Sequence[T],
    context: SliceContext,
    key: KeyFunc = field_key()
) -> Page[T]:
    """Drop sentinels and overfetch from ``rows`` and work out boundary flags.

    ``rows`` must be in query order, so reversed relative to canonical order
    when ``context.reverse_results`` is set. A boundary item that has been
    deleted since its cursor was issued simply never matches.
    """
    # Work in query order from here and flip at the end
    if context.reverse_results:
        beg_key, end_key = context.before_key, context.after_key
    else:
        beg_key, end_key = context.after_key, context.before_key

    size = len(rows)
    has_more_beg = False
    has_more_end = False
    kept = []
    for i, row in enumerate(rows):
        skip = False
        if i == 0 and beg_key is not None and key(row) == beg_key:
            has_more_beg = True
            skip = True
        if i == size - 1 and end_key is not None and key(row) == end_key:
            has_more_end = True
            skip = True
        if not skip:
            kept.append(row)

    results = kept[:context.limit]

    # Anything left over once sentinels are discounted lies past the window.
    # Relies on PAGE_EXTRA == 2.
    sentinels = int(has_more_beg) + int(has_more_end)
    if len(results) < size - sentinels:
        has_more_end = True

    if context.reverse_results:
        return Page(
            items=results[::-1],
            has_previous_page=has_more_end,
            has_next_page=has_more_beg
        )
    return Page(
        items=results,
        has_previous_page=has_more_beg,
        has_next_page=has_more_end
    )
