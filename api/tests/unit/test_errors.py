"""Tests for error handling and Problem Details implementation."""

import json
from unittest.mock import Mock

from fastapi import Request

from relay_cursor.errors.problem_details import (
    BadRequestError,
    CursorMalformedError,
    InternalServerError,
    PaginationInvalidError,
    ProblemDetail,
    ProblemDetailException,
    ServiceUnavailableError,
    create_problem_response
)


class TestProblemDetail:
    """Test ProblemDetail model."""

    def test_problem_detail_defaults(self):
        problem = ProblemDetail(title="Test Error", status=400)

        assert problem.type == "about:blank"
        assert problem.detail is None
        assert problem.instance is None

    def test_problem_detail_extra_fields(self):
        problem = ProblemDetail(title="Test Error", status=400, code="PaginationInvalid")
        assert problem.code == "PaginationInvalid"


class TestProblemDetailException:
    """Test ProblemDetailException base class."""

    def test_basic_exception(self):
        exc = ProblemDetailException(status=400, title="Test Error", detail="Test detail")

        assert exc.status == 400
        assert exc.type_uri == "about:blank"
        assert str(exc) == "Test detail"

    def test_to_problem_detail_with_request(self):
        request = Mock(spec=Request)
        request.url.path = "/v1/posts"

        problem = ProblemDetailException(status=400, title="Test Error").to_problem_detail(request)

        assert problem.instance == "/v1/posts"

    def test_to_response(self):
        exc = ProblemDetailException(status=400, title="Test Error", detail="Test detail", code="X")
        response = exc.to_response()

        assert response.status_code == 400
        assert response.headers["content-type"] == "application/problem+json"
        assert json.loads(response.body) == {
            "type": "about:blank",
            "title": "Test Error",
            "status": 400,
            "detail": "Test detail",
            "code": "X"
        }


class TestPaginationErrors:
    """Test the pagination error types."""

    def test_pagination_invalid(self):
        exc = PaginationInvalidError('The "first" parameter must be a non-negative number')

        assert isinstance(exc, BadRequestError)
        assert exc.status == 400
        assert exc.title == "Bad Request"
        assert exc.extensions == {"code": "PaginationInvalid"}

    def test_cursor_malformed(self):
        exc = CursorMalformedError()

        assert isinstance(exc, BadRequestError)
        assert exc.detail == "Cursor is malformed"
        assert exc.extensions == {"code": "CursorMalformed"}

    def test_code_can_be_overridden(self):
        exc = PaginationInvalidError("bad", code="Custom")
        assert exc.extensions["code"] == "Custom"


class TestServerErrors:
    def test_internal_server_error(self):
        exc = InternalServerError()
        assert exc.status == 500
        assert exc.detail == "Internal server error"

    def test_service_unavailable(self):
        exc = ServiceUnavailableError(database_error="refused")
        assert exc.status == 503
        assert exc.extensions["database_error"] == "refused"


def test_create_problem_response():
    request = Mock(spec=Request)
    request.url.path = "/v1/posts"

    response = create_problem_response(
        status=422,
        title="Validation Error",
        detail="bad",
        request=request
    )

    body = json.loads(response.body)
    assert response.status_code == 422
    assert body["instance"] == "/v1/posts"
    assert body["title"] == "Validation Error"
