"""
Async client for the OpenSearch REST API.

``Client.do`` is the single dispatcher every endpoint goes through: build the
request from a descriptor, perform it, classify the status and decode the
body. The endpoint families (``client.indices``, ``client.snapshot``, ...)
only plumb descriptors and typed responses through it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TypeVar

import httpx

from .api.cluster import ClusterClient
from .api.document import (
    DocumentClient,
    IndexReq,
    IndexResp,
    MGetReq,
    MGetResp,
    UpdateReq,
    UpdateResp,
)
from .api.index_template import IndexTemplateClient
from .api.indices import IndicesClient
from .api.info import InfoReq, InfoResp, PingReq
from .api.migration import MigrationClient
from .api.point_in_time import PointInTimeClient
from .api.search import ScrollClient, SearchReq, SearchResp
from .api.snapshot import SnapshotClient
from .api.tasks import TasksClient
from .config import ClientConfig
from .errors import (
    BODY_READ_ERRORS,
    DecodeError,
    LocalError,
    LocalErrorKind,
    PlainStatusError,
    TransportConnectionError,
    TransportError,
    TransportTimeoutError,
    parse_error,
)
from .request import Request
from .response import ApiResponse, Response
from .transport import HTTPXTransport, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ApiResponse)


class Client:
    """Root client holding the transport and the endpoint families."""

    def __init__(
        self, config: ClientConfig | None = None, transport: Transport | None = None
    ):
        """
        Initialize the client.

        Args:
            config: Connection settings (default: from environment variables)
            transport: Custom transport (default: ``HTTPXTransport`` built from config)
        """
        self.config = config or ClientConfig()
        self.transport = transport or HTTPXTransport(self.config)

        self.cluster = ClusterClient(self)
        self.document = DocumentClient(self)
        self.indices = IndicesClient(self)
        self.index_template = IndexTemplateClient(self)
        self.migration = MigrationClient(self)
        self.point_in_time = PointInTimeClient(self)
        self.scroll = ScrollClient(self)
        self.snapshot = SnapshotClient(self)
        self.tasks = TasksClient(self)

    async def do(
        self,
        req: Request,
        result_type: type[T] | None = None,
        *,
        timeout: float | None = None,
    ) -> tuple[T | None, Response]:
        """Send one request and decode the response into ``result_type``.

        Args:
            req: Endpoint descriptor
            result_type: Typed response to decode a successful body into
            timeout: Seconds allowed for the exchange and body reads (default: no limit)

        Returns:
            The decoded response (None without ``result_type``) and the envelope.
            On a 3xx the typed response keeps its defaults and only links the
            envelope.
            Without ``result_type`` the caller owns the unread envelope.

        Raises:
            BuildError: The descriptor could not be turned into a request
            TransportError: No response was received
            ServerError: Structured error returned by the server
            ServerStringError: String error returned by the server (405)
            LocalError: Error response that could not be read or parsed
            PlainStatusError: Error status on a call without ``result_type``
            DecodeError: Successful body did not match ``result_type``
        """
        request = req.get_request()
        async with asyncio.timeout(timeout):
            return await self._dispatch(request, result_type)

    async def _dispatch(
        self, request: httpx.Request, result_type: type[T] | None
    ) -> tuple[T | None, Response]:
        raw = await self._perform(request)
        resp = Response(raw)
        logger.debug(f"{request.method} {request.url.path} -> {resp.status()}")

        if resp.is_error():
            if request.method == "HEAD" and resp.status_code == httpx.codes.NOT_FOUND:
                await resp.aclose()
                return None, resp
            if result_type is None:
                await resp.aclose()
                raise PlainStatusError(resp.status(), response=resp)
            error = await parse_error(resp)
            logger.debug(f"{request.method} {request.url.path} failed: {error}")
            raise error

        if result_type is None:
            return None, resp

        try:
            body = await resp.read()
        except BODY_READ_ERRORS as e:
            raise LocalError(
                LocalErrorKind.READ_FAILED, resp.status(), e, response=resp
            ) from e

        # redirects are not followed; the body is left undecoded
        if resp.status_code >= httpx.codes.MULTIPLE_CHOICES:
            data = result_type.model_construct()
            data._response = resp
            return data, resp

        try:
            data = result_type.decode(body)
        except ValueError as e:
            raise DecodeError(resp.status(), e, response=resp) from e

        data._response = resp
        return data, resp

    async def _perform(self, request: httpx.Request) -> httpx.Response:
        """Call the transport, mapping httpx failures to TransportError."""
        method, url = request.method, str(request.url)
        try:
            return await self.transport.perform(request)
        except httpx.TimeoutException as e:
            logger.warning(f"{method} {url} timed out: {e}")
            raise TransportTimeoutError(method, url, e) from e
        except httpx.ConnectError as e:
            logger.warning(f"{method} {url} could not connect: {e}")
            raise TransportConnectionError(method, url, e) from e
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise TransportError(method, url, e) from e

    async def info(self, req: InfoReq | None = None, *, timeout: float | None = None) -> InfoResp:
        """Return cluster name, UUID and version."""
        data, _ = await self.do(req or InfoReq(), InfoResp, timeout=timeout)
        return data

    async def ping(self, req: PingReq | None = None, *, timeout: float | None = None) -> Response:
        """HEAD ``/``; a 404 comes back as an envelope, not an error."""
        _, resp = await self.do(req or PingReq(), timeout=timeout)
        await resp.aclose()
        return resp

    async def index(self, req: IndexReq, *, timeout: float | None = None) -> IndexResp:
        data, _ = await self.do(req, IndexResp, timeout=timeout)
        return data

    async def update(self, req: UpdateReq, *, timeout: float | None = None) -> UpdateResp:
        data, _ = await self.do(req, UpdateResp, timeout=timeout)
        return data

    async def mget(self, req: MGetReq, *, timeout: float | None = None) -> MGetResp:
        data, _ = await self.do(req, MGetResp, timeout=timeout)
        return data

    async def search(
        self, req: SearchReq | None = None, *, timeout: float | None = None
    ) -> SearchResp:
        data, _ = await self.do(req or SearchReq(), SearchResp, timeout=timeout)
        return data

    async def aclose(self) -> None:
        """Close the transport if it holds resources."""
        close = getattr(self.transport, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()


# Singleton instance
_client: Client | None = None


def get_client(config: ClientConfig | None = None) -> Client:
    """Get global client instance.

    Args:
        config: Optional config for first initialization

    Returns:
        Singleton Client instance
    """
    global _client
    if _client is None:
        _client = Client(config=config)
        logger.info(f"OpenSearch client initialized for {_client.config.url}")
    return _client
