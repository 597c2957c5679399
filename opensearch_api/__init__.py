"""Async client for the OpenSearch REST API."""

from .client import Client, get_client
from .config import ClientConfig
from .errors import (
    BuildError,
    CausedBy,
    DecodeError,
    LocalError,
    LocalErrorKind,
    OpenSearchError,
    PlainStatusError,
    RootCause,
    ServerError,
    ServerStringError,
    TransportConnectionError,
    TransportError,
    TransportTimeoutError,
    parse_error,
)
from .params import Params, format_duration
from .request import Request, build_path, build_request
from .response import ApiResponse, Inspect, Response
from .transport import HTTPXTransport, Transport

__all__ = [
    # Client
    "Client",
    "get_client",
    # Config
    "ClientConfig",
    # Transport
    "Transport",
    "HTTPXTransport",
    # Requests and responses
    "Request",
    "Params",
    "build_request",
    "build_path",
    "format_duration",
    "Response",
    "ApiResponse",
    "Inspect",
    # Exceptions
    "OpenSearchError",
    "BuildError",
    "TransportError",
    "TransportTimeoutError",
    "TransportConnectionError",
    "ServerError",
    "ServerStringError",
    "LocalError",
    "LocalErrorKind",
    "DecodeError",
    "PlainStatusError",
    "RootCause",
    "CausedBy",
    "parse_error",
]
