"""Root endpoints: cluster info and ping."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx
from pydantic import BaseModel

from ..params import Params
from ..request import build_request
from ..response import ApiResponse


@dataclass(kw_only=True)
class InfoParams(Params):
    pass


@dataclass(kw_only=True)
class InfoReq:
    params: InfoParams = field(default_factory=InfoParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request("GET", "/", params=self.params.get(), headers=self.headers)


class InfoVersion(BaseModel):
    distribution: str | None = None
    number: str | None = None
    build_type: str | None = None
    build_hash: str | None = None
    build_date: str | None = None
    build_snapshot: bool | None = None
    lucene_version: str | None = None
    minimum_wire_compatibility_version: str | None = None
    minimum_index_compatibility_version: str | None = None


class InfoResp(ApiResponse):
    """Cluster name, UUID and version as returned by ``GET /``."""

    name: str | None = None
    cluster_name: str | None = None
    cluster_uuid: str | None = None
    version: InfoVersion | None = None
    tagline: str | None = None


@dataclass(kw_only=True)
class PingParams(Params):
    pass


@dataclass(kw_only=True)
class PingReq:
    params: PingParams = field(default_factory=PingParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request("HEAD", "/", params=self.params.get(), headers=self.headers)
