"""Index management endpoints, including aliases, settings and mappings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel, Field

from ..params import Params
from ..request import build_path, build_request, required
from ..response import ApiResponse, Response
from .common import AcknowledgedResp, KeyedResponse, ResponseShards, SubClient

if TYPE_CHECKING:
    from ..client import Client

# Create


@dataclass(kw_only=True)
class IndicesCreateParams(Params):
    cluster_manager_timeout: timedelta | None = None
    master_timeout: timedelta | None = None
    timeout: timedelta | None = None
    wait_for_active_shards: str = ""


@dataclass(kw_only=True)
class IndicesCreateReq:
    index: str
    body: Any = None
    params: IndicesCreateParams = field(default_factory=IndicesCreateParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "PUT",
            build_path(required("index", self.index)),
            self.body,
            self.params.get(),
            self.headers,
        )


class IndicesCreateResp(AcknowledgedResp):
    shards_acknowledged: bool = False
    index: str | None = None


# Get


@dataclass(kw_only=True)
class IndicesGetParams(Params):
    allow_no_indices: bool | None = None
    cluster_manager_timeout: timedelta | None = None
    expand_wildcards: str = ""
    flat_settings: bool | None = None
    ignore_unavailable: bool | None = None
    include_defaults: bool | None = None
    local: bool | None = None
    master_timeout: timedelta | None = None


@dataclass(kw_only=True)
class IndicesGetReq:
    indices: list[str]
    params: IndicesGetParams = field(default_factory=IndicesGetParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "GET",
            build_path(required("indices", self.indices)),
            params=self.params.get(), headers=self.headers
        )


class IndexDetails(BaseModel):
    aliases: dict[str, Any] = Field(default_factory=dict)
    mappings: dict[str, Any] = Field(default_factory=dict)
    settings: dict[str, Any] = Field(default_factory=dict)
    data_stream: str | None = None


class IndicesGetResp(KeyedResponse):
    indices: dict[str, IndexDetails] = Field(default_factory=dict)


# Delete


@dataclass(kw_only=True)
class IndicesDeleteParams(Params):
    allow_no_indices: bool | None = None
    cluster_manager_timeout: timedelta | None = None
    expand_wildcards: str = ""
    ignore_unavailable: bool | None = None
    master_timeout: timedelta | None = None
    timeout: timedelta | None = None


@dataclass(kw_only=True)
class IndicesDeleteReq:
    indices: list[str]
    params: IndicesDeleteParams = field(default_factory=IndicesDeleteParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "DELETE",
            build_path(required("indices", self.indices)),
            params=self.params.get(), headers=self.headers
        )


class IndicesDeleteResp(AcknowledgedResp):
    pass


# Exists


@dataclass(kw_only=True)
class IndicesExistsParams(Params):
    allow_no_indices: bool | None = None
    cluster_manager_timeout: timedelta | None = None
    expand_wildcards: str = ""
    flat_settings: bool | None = None
    ignore_unavailable: bool | None = None
    include_defaults: bool | None = None
    local: bool | None = None


@dataclass(kw_only=True)
class IndicesExistsReq:
    indices: list[str]
    params: IndicesExistsParams = field(default_factory=IndicesExistsParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "HEAD",
            build_path(required("indices", self.indices)),
            params=self.params.get(), headers=self.headers
        )


# Refresh


@dataclass(kw_only=True)
class IndicesRefreshParams(Params):
    allow_no_indices: bool | None = None
    expand_wildcards: str = ""
    ignore_unavailable: bool | None = None


@dataclass(kw_only=True)
class IndicesRefreshReq:
    indices: list[str] = field(default_factory=list)
    params: IndicesRefreshParams = field(default_factory=IndicesRefreshParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "POST",
            build_path(self.indices, "_refresh"),
            params=self.params.get(),
            headers=self.headers,
        )


class IndicesRefreshResp(ApiResponse):
    shards: ResponseShards | None = Field(default=None, alias="_shards")


# Aliases


@dataclass(kw_only=True)
class AliasPutParams(Params):
    cluster_manager_timeout: timedelta | None = None
    master_timeout: timedelta | None = None
    timeout: timedelta | None = None


@dataclass(kw_only=True)
class AliasPutReq:
    indices: list[str]
    alias: str
    body: Any = None
    params: AliasPutParams = field(default_factory=AliasPutParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "PUT",
            build_path(
                required("indices", self.indices), "_alias", required("alias", self.alias)
            ),
            self.body,
            self.params.get(),
            self.headers,
        )


class AliasPutResp(AcknowledgedResp):
    pass


@dataclass(kw_only=True)
class AliasGetParams(Params):
    allow_no_indices: bool | None = None
    expand_wildcards: str = ""
    ignore_unavailable: bool | None = None
    local: bool | None = None


@dataclass(kw_only=True)
class AliasGetReq:
    indices: list[str] = field(default_factory=list)
    alias: list[str] = field(default_factory=list)
    params: AliasGetParams = field(default_factory=AliasGetParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "GET",
            build_path(self.indices, "_alias", self.alias),
            params=self.params.get(),
            headers=self.headers,
        )


class IndexAliases(BaseModel):
    aliases: dict[str, Any] = Field(default_factory=dict)


class AliasGetResp(KeyedResponse):
    indices: dict[str, IndexAliases] = Field(default_factory=dict)


@dataclass(kw_only=True)
class AliasDeleteParams(AliasPutParams):
    pass


@dataclass(kw_only=True)
class AliasDeleteReq:
    indices: list[str]
    alias: list[str]
    params: AliasDeleteParams = field(default_factory=AliasDeleteParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "DELETE",
            build_path(
                required("indices", self.indices), "_alias", required("alias", self.alias)
            ),
            params=self.params.get(),
            headers=self.headers,
        )


class AliasDeleteResp(AcknowledgedResp):
    pass


@dataclass(kw_only=True)
class AliasExistsParams(AliasGetParams):
    pass


@dataclass(kw_only=True)
class AliasExistsReq:
    indices: list[str] = field(default_factory=list)
    alias: list[str] = field(default_factory=list)
    params: AliasExistsParams = field(default_factory=AliasExistsParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "HEAD",
            build_path(self.indices, "_alias", self.alias),
            params=self.params.get(),
            headers=self.headers,
        )


# Settings


@dataclass(kw_only=True)
class SettingsGetParams(Params):
    allow_no_indices: bool | None = None
    cluster_manager_timeout: timedelta | None = None
    expand_wildcards: str = ""
    flat_settings: bool | None = None
    ignore_unavailable: bool | None = None
    include_defaults: bool | None = None
    local: bool | None = None


@dataclass(kw_only=True)
class SettingsGetReq:
    indices: list[str] = field(default_factory=list)
    settings: list[str] = field(default_factory=list)
    params: SettingsGetParams = field(default_factory=SettingsGetParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "GET",
            build_path(self.indices, "_settings", self.settings),
            params=self.params.get(),
            headers=self.headers,
        )


class IndexSettings(BaseModel):
    settings: dict[str, Any] = Field(default_factory=dict)
    defaults: dict[str, Any] | None = None


class SettingsGetResp(KeyedResponse):
    indices: dict[str, IndexSettings] = Field(default_factory=dict)


@dataclass(kw_only=True)
class SettingsPutParams(Params):
    allow_no_indices: bool | None = None
    cluster_manager_timeout: timedelta | None = None
    expand_wildcards: str = ""
    flat_settings: bool | None = None
    ignore_unavailable: bool | None = None
    preserve_existing: bool | None = None
    timeout: timedelta | None = None


@dataclass(kw_only=True)
class SettingsPutReq:
    indices: list[str] = field(default_factory=list)
    body: Any = None
    params: SettingsPutParams = field(default_factory=SettingsPutParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "PUT",
            build_path(self.indices, "_settings"),
            self.body,
            self.params.get(),
            self.headers,
        )


class SettingsPutResp(AcknowledgedResp):
    pass


# Mappings


@dataclass(kw_only=True)
class MappingGetParams(Params):
    allow_no_indices: bool | None = None
    cluster_manager_timeout: timedelta | None = None
    expand_wildcards: str = ""
    ignore_unavailable: bool | None = None
    local: bool | None = None


@dataclass(kw_only=True)
class MappingGetReq:
    indices: list[str] = field(default_factory=list)
    params: MappingGetParams = field(default_factory=MappingGetParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "GET",
            build_path(self.indices, "_mapping"),
            params=self.params.get(),
            headers=self.headers,
        )


class IndexMappings(BaseModel):
    mappings: dict[str, Any] = Field(default_factory=dict)


class MappingGetResp(KeyedResponse):
    indices: dict[str, IndexMappings] = Field(default_factory=dict)


@dataclass(kw_only=True)
class MappingPutParams(Params):
    allow_no_indices: bool | None = None
    cluster_manager_timeout: timedelta | None = None
    expand_wildcards: str = ""
    ignore_unavailable: bool | None = None
    timeout: timedelta | None = None
    write_index_only: bool | None = None


@dataclass(kw_only=True)
class MappingPutReq:
    indices: list[str]
    body: Any = None
    params: MappingPutParams = field(default_factory=MappingPutParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "PUT",
            build_path(required("indices", self.indices), "_mapping"),
            self.body,
            self.params.get(),
            self.headers,
        )


class MappingPutResp(AcknowledgedResp):
    pass


class AliasClient(SubClient):
    """Alias endpoints under ``client.indices.alias``."""

    async def put(self, req: AliasPutReq, *, timeout: float | None = None) -> AliasPutResp:
        data, _ = await self.client.do(req, AliasPutResp, timeout=timeout)
        return data

    async def get(
        self, req: AliasGetReq | None = None, *, timeout: float | None = None
    ) -> AliasGetResp:
        data, _ = await self.client.do(req or AliasGetReq(), AliasGetResp, timeout=timeout)
        return data

    async def delete(
        self, req: AliasDeleteReq, *, timeout: float | None = None
    ) -> AliasDeleteResp:
        data, _ = await self.client.do(req, AliasDeleteResp, timeout=timeout)
        return data

    async def exists(
        self, req: AliasExistsReq | None = None, *, timeout: float | None = None
    ) -> Response:
        _, resp = await self.client.do(req or AliasExistsReq(), timeout=timeout)
        await resp.aclose()
        return resp


class SettingsClient(SubClient):
    """Index settings endpoints under ``client.indices.settings``."""

    async def get(
        self, req: SettingsGetReq | None = None, *, timeout: float | None = None
    ) -> SettingsGetResp:
        data, _ = await self.client.do(
            req or SettingsGetReq(), SettingsGetResp, timeout=timeout
        )
        return data

    async def put(
        self, req: SettingsPutReq, *, timeout: float | None = None
    ) -> SettingsPutResp:
        data, _ = await self.client.do(req, SettingsPutResp, timeout=timeout)
        return data


class MappingClient(SubClient):
    """Mapping endpoints under ``client.indices.mapping``."""

    async def get(
        self, req: MappingGetReq | None = None, *, timeout: float | None = None
    ) -> MappingGetResp:
        data, _ = await self.client.do(req or MappingGetReq(), MappingGetResp, timeout=timeout)
        return data

    async def put(self, req: MappingPutReq, *, timeout: float | None = None) -> MappingPutResp:
        data, _ = await self.client.do(req, MappingPutResp, timeout=timeout)
        return data


class IndicesClient(SubClient):
    """Index endpoints grouped under ``client.indices``."""

    def __init__(self, client: Client):
        super().__init__(client)
        self.alias = AliasClient(client)
        self.settings = SettingsClient(client)
        self.mapping = MappingClient(client)

    async def create(
        self, req: IndicesCreateReq, *, timeout: float | None = None
    ) -> IndicesCreateResp:
        data, _ = await self.client.do(req, IndicesCreateResp, timeout=timeout)
        return data

    async def get(self, req: IndicesGetReq, *, timeout: float | None = None) -> IndicesGetResp:
        data, _ = await self.client.do(req, IndicesGetResp, timeout=timeout)
        return data

    async def delete(
        self, req: IndicesDeleteReq, *, timeout: float | None = None
    ) -> IndicesDeleteResp:
        data, _ = await self.client.do(req, IndicesDeleteResp, timeout=timeout)
        return data

    async def exists(self, req: IndicesExistsReq, *, timeout: float | None = None) -> Response:
        _, resp = await self.client.do(req, timeout=timeout)
        await resp.aclose()
        return resp

    async def refresh(
        self, req: IndicesRefreshReq | None = None, *, timeout: float | None = None
    ) -> IndicesRefreshResp:
        data, _ = await self.client.do(
            req or IndicesRefreshReq(), IndicesRefreshResp, timeout=timeout
        )
        return data
