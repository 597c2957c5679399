"""Point-in-time endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

import httpx
from pydantic import BaseModel, Field

from ..params import Params
from ..request import build_path, build_request, required
from ..response import ApiResponse
from .common import ResponseShards, SubClient


@dataclass(kw_only=True)
class PointInTimeCreateParams(Params):
    keep_alive: timedelta | None = None
    preference: str = ""
    routing: str = ""
    expand_wildcards: str = ""
    allow_partial_pit_creation: bool = False


@dataclass(kw_only=True)
class PointInTimeCreateReq:
    indices: list[str]
    params: PointInTimeCreateParams = field(default_factory=PointInTimeCreateParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "POST",
            build_path(required("indices", self.indices), "_search", "point_in_time"),
            params=self.params.get(),
            headers=self.headers,
        )


class PointInTimeCreateResp(ApiResponse):
    pit_id: str | None = None
    shards: ResponseShards | None = Field(default=None, alias="_shards")
    creation_time: int | None = None


@dataclass(kw_only=True)
class PointInTimeGetParams(Params):
    pass


@dataclass(kw_only=True)
class PointInTimeGetReq:
    """List every point in time open on the cluster."""

    params: PointInTimeGetParams = field(default_factory=PointInTimeGetParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "GET",
            "/_search/point_in_time/_all",
            params=self.params.get(),
            headers=self.headers,
        )


class PointInTime(BaseModel):
    pit_id: str | None = None
    creation_time: int | None = None
    keep_alive: int | None = None


class PointInTimeGetResp(ApiResponse):
    pits: list[PointInTime] = Field(default_factory=list)


@dataclass(kw_only=True)
class PointInTimeDeleteParams(Params):
    pass


@dataclass(kw_only=True)
class PointInTimeDeleteReq:
    """Delete the given points in time; without ids no body is sent."""

    pit_id: list[str] = field(default_factory=list)
    params: PointInTimeDeleteParams = field(default_factory=PointInTimeDeleteParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        body = {"pit_id": list(self.pit_id)} if self.pit_id else None
        return build_request(
            "DELETE",
            "/_search/point_in_time",
            body,
            self.params.get(),
            self.headers,
        )


class DeletedPointInTime(BaseModel):
    pit_id: str | None = None
    successful: bool = False


class PointInTimeDeleteResp(ApiResponse):
    pits: list[DeletedPointInTime] = Field(default_factory=list)


class PointInTimeClient(SubClient):
    """Point-in-time endpoints grouped under ``client.point_in_time``."""

    async def create(
        self, req: PointInTimeCreateReq, *, timeout: float | None = None
    ) -> PointInTimeCreateResp:
        data, _ = await self.client.do(req, PointInTimeCreateResp, timeout=timeout)
        return data

    async def get(
        self, req: PointInTimeGetReq | None = None, *, timeout: float | None = None
    ) -> PointInTimeGetResp:
        data, _ = await self.client.do(
            req or PointInTimeGetReq(), PointInTimeGetResp, timeout=timeout
        )
        return data

    async def delete(
        self, req: PointInTimeDeleteReq | None = None, *, timeout: float | None = None
    ) -> PointInTimeDeleteResp:
        data, _ = await self.client.do(
            req or PointInTimeDeleteReq(), PointInTimeDeleteResp, timeout=timeout
        )
        return data
