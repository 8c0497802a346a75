"""Error handling module for the Relay Cursor API."""

from .problem_details import (
    ProblemDetail,
    ProblemDetailException,
    BadRequestError,
    CursorMalformedError,
    PaginationInvalidError,
    InternalServerError,
    ServiceUnavailableError,
    create_problem_response
)
from .handlers import register_exception_handlers

__all__ = [
    "ProblemDetail",
    "ProblemDetailException",
    "BadRequestError",
    "CursorMalformedError",
    "PaginationInvalidError",
    "InternalServerError",
    "ServiceUnavailableError",
    "create_problem_response",
    "register_exception_handlers"
]
