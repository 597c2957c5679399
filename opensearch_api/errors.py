"""Exceptions raised by the client and the parser for server error bodies."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, Field, ValidationError

if TYPE_CHECKING:
    from .response import Response

logger = logging.getLogger(__name__)

# Errors that can surface while draining a response body.
BODY_READ_ERRORS = (httpx.HTTPError, httpx.StreamError)


class OpenSearchError(Exception):
    """Base exception for client errors.

    Errors raised after the server answered carry the response envelope on
    ``response`` so callers can still inspect headers and the raw body.
    """

    def __init__(self, message: str, response: Response | None = None):
        super().__init__(message)
        self.message = message
        self.response = response


class BuildError(OpenSearchError):
    """The request could not be built (bad method, path value, URL or body)."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class TransportError(OpenSearchError):
    """The transport failed before a response was received."""

    def __init__(self, method: str, url: str, cause: Exception):
        self.method = method
        self.url = url
        self.cause = cause
        super().__init__(f"{method} {url} failed: {cause}")


class TransportTimeoutError(TransportError):
    """The transport gave up waiting for the server."""


class TransportConnectionError(TransportError):
    """The transport could not connect to the server."""


class RootCause(BaseModel):
    """Single entry of ``root_cause`` in a structured error body."""

    type: str | None = None
    reason: str | None = None
    index: str | None = None
    index_uuid: str | None = None

    def __str__(self) -> str:
        return f"{self.type}: {self.reason}"


class CausedBy(BaseModel):
    """Nested ``caused_by`` chain of a structured error body."""

    type: str | None = None
    reason: str | None = None
    caused_by: CausedBy | None = None


class ServerError(OpenSearchError):
    """Structured error returned by the server."""

    def __init__(
        self,
        status: int,
        type: str | None,
        reason: str | None,
        index: str | None = None,
        index_uuid: str | None = None,
        root_causes: list[RootCause] | None = None,
        caused_by: CausedBy | None = None,
        response: Response | None = None,
    ):
        self.status = status
        self.type = type
        self.reason = reason
        self.index = index
        self.index_uuid = index_uuid
        self.root_causes = root_causes or []
        self.caused_by = caused_by
        root = ", ".join(str(cause) for cause in self.root_causes)
        super().__init__(
            f"status: {status}, type: {type}, reason: {reason}, root_cause: [{root}]",
            response=response,
        )


class ServerStringError(OpenSearchError):
    """Server error whose ``error`` field is a plain string."""

    def __init__(self, status: int, message: str, response: Response | None = None):
        self.status = status
        self.error = message
        super().__init__(f"status: {status}, error: {message}", response=response)


class LocalErrorKind(str, Enum):
    """What went wrong while handling an error response."""

    EMPTY_BODY = "empty-body"
    READ_FAILED = "read-failed"
    DECODE_FAILED = "decode-failed"
    UNKNOWN_SHAPE = "unknown-shape"


_LOCAL_MESSAGES = {
    LocalErrorKind.EMPTY_BODY: "body is unexpectedly empty",
    LocalErrorKind.READ_FAILED: "failed to read body",
    LocalErrorKind.DECODE_FAILED: "failed to json decode body",
    LocalErrorKind.UNKNOWN_SHAPE: "error response could not be parsed as error",
}


class LocalError(OpenSearchError):
    """A response could not be turned into a server error."""

    def __init__(
        self,
        kind: LocalErrorKind,
        status: str,
        cause: Exception | str | None = None,
        response: Response | None = None,
    ):
        self.kind = kind
        self.status = status
        self.cause = cause
        message = f"{_LOCAL_MESSAGES[kind]}, status: {status}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, response=response)


class DecodeError(OpenSearchError):
    """A successful response body could not be decoded."""

    def __init__(self, status: str, cause: Exception, response: Response | None = None):
        self.status = status
        self.cause = cause
        super().__init__(f"failed to decode response, status: {status}: {cause}", response=response)


class PlainStatusError(OpenSearchError):
    """Error-class status on a call that expects no typed result."""

    def __init__(self, status: str, response: Response | None = None):
        self.status = status
        super().__init__(f"status: {status}", response=response)


class _ErrorDetail(BaseModel):
    root_cause: list[RootCause] = Field(default_factory=list)
    type: str | None = None
    reason: str | None = None
    index: str | None = None
    index_uuid: str | None = None
    caused_by: CausedBy | None = None


class _StructuredErrorBody(BaseModel):
    error: _ErrorDetail = Field(default_factory=_ErrorDetail)
    status: int = 0


class _StringErrorBody(BaseModel):
    error: str
    status: int = 0


async def parse_error(response: Response) -> OpenSearchError:
    """Turn an error-class response into the matching exception.

    The exception is returned, not raised. The body is consumed (and cached
    on the envelope). A 405 is always decoded as a string error; every other
    status is decoded as a structured error, without sniffing the body.
    """
    status = response.status()

    try:
        body = await response.read()
    except httpx.StreamError:
        # closed before anyone read it
        return LocalError(LocalErrorKind.EMPTY_BODY, status, response=response)
    except BODY_READ_ERRORS as e:
        return LocalError(LocalErrorKind.READ_FAILED, status, e, response=response)

    if not body:
        return LocalError(LocalErrorKind.EMPTY_BODY, status, response=response)

    if response.status_code == httpx.codes.METHOD_NOT_ALLOWED:
        try:
            parsed = _StringErrorBody.model_validate_json(body)
        except ValidationError as e:
            return LocalError(LocalErrorKind.DECODE_FAILED, status, e, response=response)
        return ServerStringError(
            parsed.status or response.status_code, parsed.error, response=response
        )

    try:
        structured = _StructuredErrorBody.model_validate_json(body)
    except ValidationError as e:
        return LocalError(LocalErrorKind.DECODE_FAILED, status, e, response=response)

    detail = structured.error
    if not (detail.type or detail.reason or detail.root_cause):
        snippet = body[:200].decode("utf-8", errors="replace")
        return LocalError(LocalErrorKind.UNKNOWN_SHAPE, status, snippet, response=response)

    return ServerError(
        status=structured.status or response.status_code,
        type=detail.type,
        reason=detail.reason,
        index=detail.index,
        index_uuid=detail.index_uuid,
        root_causes=detail.root_cause,
        caused_by=detail.caused_by,
        response=response,
    )
