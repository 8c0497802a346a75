"""Validation of raw Relay connection arguments."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..errors.problem_details import CursorMalformedError, PaginationInvalidError
from .cursor import Key, decode_cursor


class DirectionKind(str, Enum):
    """Which end of the window a page is anchored to."""

    FIRST = "first"
    LAST = "last"


class PaginationDirection(BaseModel):
    """Requested page size and the end of the window it is counted from."""

    kind: DirectionKind
    count: int = Field(ge=0, description="Requested items, excluding sentinel overfetch")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def first(cls, count: int) -> "PaginationDirection":
        return cls(kind=DirectionKind.FIRST, count=count)

    @classmethod
    def last(cls, count: int) -> "PaginationDirection":
        return cls(kind=DirectionKind.LAST, count=count)

    @property
    def limit(self) -> int:
        return self.count

    @property
    def is_backward(self) -> bool:
        return self.kind is DirectionKind.LAST


class PaginationRequest(BaseModel):
    """A validated, direction-aware pagination request."""

    direction: Optional[PaginationDirection] = None
    after: Optional[Key] = None
    before: Optional[Key] = None

    model_config = ConfigDict(frozen=True)

    def forward(self, first: int) -> "PaginationRequest":
        return self.model_copy(update={"direction": PaginationDirection.first(first)})

    def backward(self, last: int) -> "PaginationRequest":
        return self.model_copy(update={"direction": PaginationDirection.last(last)})

    def with_after(self, after: Optional[Key]) -> "PaginationRequest":
        return self.model_copy(update={"after": after})

    def with_before(self, before: Optional[Key]) -> "PaginationRequest":
        return self.model_copy(update={"before": before})


class PaginationArgs(BaseModel):
    """Raw connection arguments as received from a caller."""

    after: Optional[str] = Field(default=None, description="Return items after this cursor")
    before: Optional[str] = Field(default=None, description="Return items before this cursor")
    first: Optional[int] = Field(default=None, description="Page size counted from the start")
    last: Optional[int] = Field(default=None, description="Page size counted from the end")

    def validate_request(self) -> PaginationRequest:
        """Validate these arguments, see :func:`validate_pagination`."""
        return validate_pagination(
            after=self.after,
            before=self.before,
            first=self.first,
            last=self.last
        )


def _parse_cursor(cursor: Optional[str]) -> Optional[Key]:
    if cursor is None:
        return None
    try:
        return decode_cursor(cursor)
    except CursorMalformedError as e:
        raise PaginationInvalidError(e.detail) from e


def validate_pagination(
    after: Optional[str] = None,
    before: Optional[str] = None,
    first: Optional[int] = None,
    last: Optional[int] = None
) -> PaginationRequest:
    """Turn raw ``(after, before, first, last)`` into a PaginationRequest.

    Rules are checked in order: ``first`` and ``last`` are mutually
    exclusive, whichever is given must be non-negative, then both cursors
    are decoded.

    Raises:
        PaginationInvalidError: On any rule violation or malformed cursor
    """
    if first is not None and last is not None:
        raise PaginationInvalidError('The "first" and "last" parameters cannot exist at the same time')
    if first is not None and first < 0:
        raise PaginationInvalidError('The "first" parameter must be a non-negative number')
    if last is not None and last < 0:
        raise PaginationInvalidError('The "last" parameter must be a non-negative number')

    if first is not None:
        direction = PaginationDirection.first(first)
    elif last is not None:
        direction = PaginationDirection.last(last)
    else:
        direction = None

    return PaginationRequest(
        direction=direction,
        after=_parse_cursor(after),
        before=_parse_cursor(before)
    )
