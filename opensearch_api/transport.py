"""HTTP transport used by the client.

The client only needs ``perform``: send one request, return the streamed
response. Anything implementing the ``Transport`` protocol can be plugged
in (retries, signing, test doubles).
"""

from __future__ import annotations

import logging
import ssl
from typing import Protocol, runtime_checkable

import httpx

from .config import ClientConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Performs one HTTP round-trip. Must be safe for concurrent calls."""

    async def perform(self, request: httpx.Request) -> httpx.Response: ...


def _verify_setting(config: ClientConfig) -> ssl.SSLContext | bool:
    if not config.verify_certs:
        logger.warning(
            f"TLS certificate verification disabled for {config.url}; "
            "do not use this against production clusters"
        )
        return False
    if config.ca_certs:
        return ssl.create_default_context(cafile=config.ca_certs)
    return True


class HTTPXTransport:
    """Default transport backed by a pooled ``httpx.AsyncClient``.

    Requests built with a relative URL are resolved against ``config.url``,
    keeping any path prefix of the base URL.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the transport.

        Args:
            config: Connection settings (default: from environment variables)
            http_transport: Lower-level httpx transport, e.g. ``httpx.MockTransport``
        """
        self.config = config or ClientConfig()
        self.base_url = httpx.URL(self.config.url)

        auth = None
        if self.config.username is not None:
            password = self.config.password.get_secret_value() if self.config.password else ""
            auth = httpx.BasicAuth(self.config.username, password)

        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(
                self.config.request_timeout, connect=self.config.connect_timeout
            ),
            verify=_verify_setting(self.config),
            auth=auth,
            limits=httpx.Limits(max_connections=self.config.max_connections),
            transport=http_transport,
        )
        logger.debug(f"HTTP transport created for {self.base_url}")

    def resolve(self, url: httpx.URL) -> httpx.URL:
        """Resolve a relative request URL against the base URL."""
        if url.is_absolute_url:
            return url
        base_path = self.base_url.raw_path.split(b"?", 1)[0].rstrip(b"/")
        return self.base_url.copy_with(raw_path=base_path + url.raw_path)

    async def perform(self, request: httpx.Request) -> httpx.Response:
        request.url = self.resolve(request.url)
        if "Host" not in request.headers:
            request.headers["Host"] = request.url.netloc.decode("ascii")
        for name, value in self.config.headers.items():
            request.headers.setdefault(name, value)
        return await self._client.send(request, stream=True)

    async def aclose(self) -> None:
        await self._client.aclose()
        logger.debug(f"HTTP transport for {self.base_url} closed")

    async def __aenter__(self) -> HTTPXTransport:
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()
