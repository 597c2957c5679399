"""Response envelope and the base model for typed responses."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, PrivateAttr

from .errors import BODY_READ_ERRORS, OpenSearchError, parse_error


class Response:
    """Thin wrapper over the raw HTTP response.

    Status and header inspection never touch the body. The body can be read
    once; after that it is cached on the envelope and the stream is closed.
    The owner of the envelope must close it (``aclose`` or ``async with``)
    when the body was not read.
    """

    def __init__(self, raw: httpx.Response):
        self.raw = raw
        self._body: bytes | None = None

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.raw.headers

    @property
    def body(self) -> bytes | None:
        """The body bytes when they have already been read, else None."""
        return self._body

    @property
    def is_closed(self) -> bool:
        return self.raw.is_closed

    def status(self) -> str:
        reason = httpx.codes.get_reason_phrase(self.status_code)
        if not reason:
            return str(self.status_code)
        return f"{self.status_code} {reason}"

    def is_error(self) -> bool:
        return 400 <= self.status_code <= 599

    def warnings(self) -> list[str]:
        return self.headers.get_list("Warning")

    def has_warnings(self) -> bool:
        return len(self.warnings()) > 0

    async def read(self) -> bytes:
        """Read the whole body, caching it for later calls."""
        if self._body is None:
            try:
                self._body = await self.raw.aread()
            finally:
                await self.raw.aclose()
        return self._body

    async def json(self) -> Any:
        return json.loads(await self.read())

    async def dump(self) -> str:
        """Render ``[<status>] <body>``, reading the body if needed."""
        prefix = f"[{self.status()}]"
        try:
            body = await self.read()
        except BODY_READ_ERRORS as e:
            return f"{prefix} <error reading response body: {e}>"
        if not body:
            return prefix
        return f"{prefix} {body.decode('utf-8', errors='replace')}"

    async def err(self) -> OpenSearchError | None:
        """Return the parsed error for error-class responses, else None."""
        if not self.is_error():
            return None
        return await parse_error(self)

    async def aclose(self) -> None:
        await self.raw.aclose()

    async def __aenter__(self) -> Response:
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()

    def __str__(self) -> str:
        if not self._body:
            return f"[{self.status()}]"
        return f"[{self.status()}] {self._body.decode('utf-8', errors='replace')}"

    def __repr__(self) -> str:
        return f"<Response [{self.status()}]>"


@dataclass(frozen=True)
class Inspect:
    """Access to the raw exchange behind a typed response."""

    response: Response | None


class ApiResponse(BaseModel):
    """Base for typed responses decoded from a successful body."""

    model_config = ConfigDict(populate_by_name=True)

    _response: Response | None = PrivateAttr(default=None)

    @classmethod
    def decode(cls, raw: bytes) -> ApiResponse:
        return cls.model_validate_json(raw)

    def inspect(self) -> Inspect:
        return Inspect(response=self._response)
