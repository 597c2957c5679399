"""Unit tests for error response parsing."""

import httpx
import pytest

from opensearch_api.errors import (
    LocalError,
    LocalErrorKind,
    ServerError,
    ServerStringError,
    parse_error,
)
from opensearch_api.response import Response
from tests.helpers import FailingStream, make_response

INDEX_EXISTS_BODY = {
    "error": {
        "root_cause": [
            {
                "type": "resource_already_exists_exception",
                "reason": "index [movies/abc] already exists",
                "index": "movies",
                "index_uuid": "abc",
            }
        ],
        "type": "resource_already_exists_exception",
        "reason": "index [movies/abc] already exists",
        "index": "movies",
        "index_uuid": "abc",
    },
    "status": 400,
}


class TestStructuredErrors:
    """Test structured error bodies."""

    @pytest.mark.asyncio
    async def test_structured_error(self):
        """Test every field of a structured error is populated."""
        resp = Response(make_response(400, INDEX_EXISTS_BODY))

        err = await parse_error(resp)

        assert isinstance(err, ServerError)
        assert err.status == 400
        assert err.type == "resource_already_exists_exception"
        assert err.reason == "index [movies/abc] already exists"
        assert err.index == "movies"
        assert err.index_uuid == "abc"
        assert len(err.root_causes) == 1
        assert err.root_causes[0].index == "movies"
        assert "resource_already_exists_exception" in str(err)
        assert err.response is resp

    @pytest.mark.asyncio
    async def test_body_is_cached_after_parse(self):
        """Test the envelope still exposes the body once the error is parsed."""
        resp = Response(make_response(400, INDEX_EXISTS_BODY))

        await parse_error(resp)

        assert resp.body is not None
        assert b"resource_already_exists_exception" in resp.body

    @pytest.mark.asyncio
    async def test_caused_by_chain(self):
        """Test nested caused_by entries are kept."""
        body = {
            "error": {
                "type": "search_phase_execution_exception",
                "reason": "all shards failed",
                "caused_by": {
                    "type": "illegal_argument_exception",
                    "reason": "bad field",
                    "caused_by": {"type": "number_format_exception", "reason": "x"},
                },
            },
            "status": 400,
        }

        err = await parse_error(Response(make_response(400, body)))

        assert isinstance(err, ServerError)
        assert err.caused_by.type == "illegal_argument_exception"
        assert err.caused_by.caused_by.type == "number_format_exception"
        assert err.caused_by.caused_by.caused_by is None

    @pytest.mark.asyncio
    async def test_missing_status_falls_back_to_http_status(self):
        body = {"error": {"type": "index_not_found_exception", "reason": "no such index"}}

        err = await parse_error(Response(make_response(404, body)))

        assert isinstance(err, ServerError)
        assert err.status == 404

    @pytest.mark.asyncio
    async def test_unknown_fields_are_ignored(self):
        body = dict(INDEX_EXISTS_BODY)
        body["error"] = dict(INDEX_EXISTS_BODY["error"], extra={"a": 1})

        err = await parse_error(Response(make_response(400, body)))

        assert isinstance(err, ServerError)


class TestStringErrors:
    """Test the 405 string error shape."""

    @pytest.mark.asyncio
    async def test_method_not_allowed(self):
        """Test a 405 body decodes into a string error."""
        body = {
            "error": "Incorrect HTTP method for uri [/movies] and method [POST], "
            "allowed: [PUT, GET, DELETE, HEAD]",
            "status": 405,
        }

        err = await parse_error(Response(make_response(405, body)))

        assert isinstance(err, ServerStringError)
        assert err.status == 405
        assert err.error.startswith("Incorrect HTTP method")

    @pytest.mark.asyncio
    async def test_string_error_on_other_status_is_decode_failure(self):
        """Test the string shape is only accepted for 405."""
        body = {"error": "something", "status": 400}

        err = await parse_error(Response(make_response(400, body)))

        assert isinstance(err, LocalError)
        assert err.kind is LocalErrorKind.DECODE_FAILED
        assert err.status == "400 Bad Request"

    @pytest.mark.asyncio
    async def test_structured_error_on_405_is_decode_failure(self):
        """Test a 405 is never sniffed for the structured shape."""
        err = await parse_error(Response(make_response(405, INDEX_EXISTS_BODY)))

        assert isinstance(err, LocalError)
        assert err.kind is LocalErrorKind.DECODE_FAILED


class TestLocalErrors:
    """Test responses that cannot be turned into server errors."""

    @pytest.mark.asyncio
    async def test_empty_body(self):
        """Test an error status with no body."""
        err = await parse_error(Response(make_response(400)))

        assert isinstance(err, LocalError)
        assert err.kind is LocalErrorKind.EMPTY_BODY
        assert err.status == "400 Bad Request"
        assert str(err) == "body is unexpectedly empty, status: 400 Bad Request"

    @pytest.mark.asyncio
    async def test_closed_unread_response_is_empty(self):
        """Test a response closed before reading counts as empty."""
        resp = Response(httpx.Response(500, stream=FailingStream()))
        await resp.aclose()

        err = await parse_error(resp)

        assert isinstance(err, LocalError)
        assert err.kind is LocalErrorKind.EMPTY_BODY

    @pytest.mark.asyncio
    async def test_read_failure(self):
        """Test a broken stream is reported as a read failure."""
        err = await parse_error(Response(httpx.Response(502, stream=FailingStream())))

        assert isinstance(err, LocalError)
        assert err.kind is LocalErrorKind.READ_FAILED
        assert isinstance(err.cause, httpx.ReadError)

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        err = await parse_error(Response(make_response(500, "<html>oops</html>")))

        assert isinstance(err, LocalError)
        assert err.kind is LocalErrorKind.DECODE_FAILED
        assert err.status == "500 Internal Server Error"

    @pytest.mark.parametrize("body", [{}, {"error": {}}, {"status": 500}])
    @pytest.mark.asyncio
    async def test_unknown_shape(self, body):
        """Test valid JSON that carries no error information."""
        err = await parse_error(Response(make_response(500, body)))

        assert isinstance(err, LocalError)
        assert err.kind is LocalErrorKind.UNKNOWN_SHAPE

    @pytest.mark.asyncio
    async def test_unknown_shape_snippet_is_truncated(self):
        body = '{"other": "' + "x" * 500 + '"}'

        err = await parse_error(Response(make_response(500, body)))

        assert err.kind is LocalErrorKind.UNKNOWN_SHAPE
        assert len(err.cause) == 200
