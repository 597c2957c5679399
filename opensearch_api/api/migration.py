"""Storage tier migration between warm and cold."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import httpx

from ..params import Params
from ..request import build_path, build_request, required
from ..response import ApiResponse
from .common import SubClient


@dataclass(kw_only=True)
class MigrationParams(Params):
    expand_wildcards: str = ""
    format: str = ""
    h: list[str] = field(default_factory=list)
    help: bool | None = None
    local: bool | None = None
    s: list[str] = field(default_factory=list)
    v: bool | None = None


@dataclass(kw_only=True)
class ColdToWarmReq:
    body: Any = None
    params: MigrationParams = field(default_factory=MigrationParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "POST", "/_cold/migration/_warm", self.body, self.params.get(), self.headers
        )


@dataclass(kw_only=True)
class WarmToColdParams(MigrationParams):
    start_time: datetime | None = None
    end_time: datetime | None = None


@dataclass(kw_only=True)
class WarmToColdReq:
    index: str
    body: Any = None
    params: WarmToColdParams = field(default_factory=WarmToColdParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "POST",
            build_path("_ultrawarm", "migration", required("index", self.index), "_cold"),
            self.body,
            self.params.get(),
            self.headers,
        )


class MigrationResp(ApiResponse):
    acknowledged: bool | None = None


class MigrationClient(SubClient):
    """Tier migration endpoints grouped under ``client.migration``."""

    async def cold_to_warm(
        self, req: ColdToWarmReq | None = None, *, timeout: float | None = None
    ) -> MigrationResp:
        data, _ = await self.client.do(req or ColdToWarmReq(), MigrationResp, timeout=timeout)
        return data

    async def warm_to_cold(
        self, req: WarmToColdReq, *, timeout: float | None = None
    ) -> MigrationResp:
        data, _ = await self.client.do(req, MigrationResp, timeout=timeout)
        return data
