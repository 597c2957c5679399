"""Shapes shared by several endpoint families."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, Field

from ..response import ApiResponse

if TYPE_CHECKING:
    from ..client import Client


class SubClient:
    """Endpoint family bound to the root client."""

    def __init__(self, client: Client):
        self.client = client


class ShardFailureReason(BaseModel):
    type: str | None = None
    reason: str | None = None


class ShardFailure(BaseModel):
    """One failed shard inside ``_shards.failures``."""

    shard: int | None = None
    index: Any = None
    node: str | None = None
    status: str | None = None
    reason: ShardFailureReason | None = None


class ResponseShards(BaseModel):
    """The ``_shards`` summary carried by most write and search responses."""

    total: int = 0
    successful: int = 0
    failed: int = 0
    skipped: int = 0
    failures: list[ShardFailure] = Field(default_factory=list)


class AcknowledgedResp(ApiResponse):
    """Response of calls that only report ``acknowledged``."""

    acknowledged: bool = False


class KeyedResponse(ApiResponse):
    """Response whose body is an object keyed by index (or repository) name.

    The whole body lands in the field named by ``root_field``.
    """

    root_field: ClassVar[str] = "indices"

    @classmethod
    def decode(cls, raw: bytes) -> KeyedResponse:
        return cls.model_validate({cls.root_field: json.loads(raw)})
