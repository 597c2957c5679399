"""Shared test helpers for opensearch_api tests."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx


def make_response(
    status_code: int,
    body: Any = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Build a raw httpx response; dicts and lists are JSON encoded."""
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    return httpx.Response(status_code, content=body, headers=headers)


class FailingStream(httpx.AsyncByteStream):
    """Response stream that breaks on the first read."""

    async def __aiter__(self):
        raise httpx.ReadError("connection reset by peer")
        yield b""  # pragma: no cover

    async def aclose(self) -> None:
        pass


class FakeTransport:
    """Transport double recording every request it is asked to perform."""

    def __init__(
        self,
        response: httpx.Response | None = None,
        error: Exception | None = None,
    ) -> None:
        self.response = response or make_response(200, {})
        self.error = error
        self.requests: list[httpx.Request] = []

    async def perform(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


class BlockingTransport:
    """Transport that never answers until released."""

    def __init__(self) -> None:
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self.cancelled = False

    async def perform(self, request: httpx.Request) -> httpx.Response:
        self.started.set()
        try:
            await self.release.wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return make_response(200, {})
