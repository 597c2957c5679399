"""Request builder and the descriptor contract.

Descriptors build an ``httpx.Request`` with a relative URL (path and query).
The transport resolves it against the configured base URL.
"""

from __future__ import annotations

import json
import re
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Mapping
from typing import Any, Protocol, runtime_checkable
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from .errors import BuildError

HEADER_CONTENT_TYPE = "Content-Type"
HEADER_OPAQUE_ID = "X-Opaque-Id"
CONTENT_TYPE_JSON = "application/json"

# RFC 9110 token characters
_METHOD_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

# Left unescaped so identifiers that are already safe stay byte-identical.
_SAFE_SEGMENT_CHARS = ",*:+"

_CHUNK_SIZE = 64 * 1024


@runtime_checkable
class Request(Protocol):
    """Anything the dispatcher can send: it only needs to build a request."""

    def get_request(self) -> httpx.Request: ...


def escape_segment(segment: str) -> str:
    """Percent-escape one path segment, including ``/``, ``#`` and ``?``."""
    return quote(segment, safe=_SAFE_SEGMENT_CHARS)


def required(name: str, value: str | Iterable[str]) -> str | Iterable[str]:
    """Return a mandatory path value, raising BuildError when it is empty.

    Lists must be non-empty and hold no empty entries.
    """
    if isinstance(value, str):
        missing = not value
    else:
        value = list(value)
        missing = not value or not all(value)
    if missing:
        raise BuildError(f"missing required path value: {name}")
    return value


def build_path(*segments: str | Iterable[str] | None) -> str:
    """Join path segments into an absolute path.

    Lists are comma-joined before escaping. Empty or None segments are
    skipped, so optional slots never produce ``//``.
    """
    parts = []
    for segment in segments:
        if segment is None:
            continue
        if not isinstance(segment, str):
            segment = ",".join(segment)
        if segment:
            parts.append(escape_segment(segment))
    return "/" + "/".join(parts)


async def _iter_file(stream: Any) -> AsyncIterator[bytes]:
    while chunk := stream.read(_CHUNK_SIZE):
        yield chunk.encode("utf-8") if isinstance(chunk, str) else chunk


async def _iter_sync(chunks: Iterable[Any]) -> AsyncIterator[bytes]:
    for chunk in chunks:
        yield chunk.encode("utf-8") if isinstance(chunk, str) else chunk


def encode_body(body: Any) -> bytes | str | AsyncIterable[bytes]:
    """Turn a descriptor body into request content.

    Bytes and text are sent as-is, file objects and iterators are streamed
    once, everything else is serialised as JSON.
    """
    if isinstance(body, (bytes, bytearray, str)):
        return bytes(body) if isinstance(body, bytearray) else body
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True, exclude_none=True)
    if isinstance(body, (Mapping, list, tuple)):
        try:
            return json.dumps(body)
        except (TypeError, ValueError) as e:
            raise BuildError(f"failed to encode request body: {e}", e) from e
    if hasattr(body, "read"):
        return _iter_file(body)
    if isinstance(body, AsyncIterable):
        return body
    if isinstance(body, Iterable):
        return _iter_sync(body)
    raise BuildError(f"unsupported request body type: {type(body).__name__}")


def build_request(
    method: str,
    path: str,
    body: Any = None,
    params: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
) -> httpx.Request:
    """Build the HTTP request for one endpoint call.

    Caller headers win over the built-in ones. ``Content-Type`` defaults to
    JSON only when there is a body.

    Raises:
        BuildError: The method, URL or body is invalid
    """
    if not _METHOD_RE.fullmatch(method):
        raise BuildError(f"invalid method: {method!r}")

    merged = httpx.Headers(headers or {})
    content = None
    if body is not None:
        content = encode_body(body)
        if HEADER_CONTENT_TYPE not in merged:
            merged[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON

    try:
        return httpx.Request(
            method,
            httpx.URL(path, params=params or None),
            headers=merged,
            content=content,
        )
    except httpx.InvalidURL as e:
        raise BuildError(f"invalid request url {path!r}: {e}", e) from e
