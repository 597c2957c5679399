"""Composable index template endpoints (``/_index_template``)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

import httpx
from pydantic import BaseModel, Field

from ..params import Params
from ..request import build_path, build_request, required
from ..response import ApiResponse, Response
from .common import AcknowledgedResp, SubClient


@dataclass(kw_only=True)
class IndexTemplateCreateParams(Params):
    cluster_manager_timeout: timedelta | None = None
    create: bool | None = None
    master_timeout: timedelta | None = None


@dataclass(kw_only=True)
class IndexTemplateCreateReq:
    index_template: str
    body: Any
    params: IndexTemplateCreateParams = field(default_factory=IndexTemplateCreateParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "PUT",
            build_path("_index_template", required("index_template", self.index_template)),
            self.body,
            self.params.get(),
            self.headers,
        )


class IndexTemplateCreateResp(AcknowledgedResp):
    pass


@dataclass(kw_only=True)
class IndexTemplateGetParams(Params):
    cluster_manager_timeout: timedelta | None = None
    flat_settings: bool | None = None
    local: bool | None = None
    master_timeout: timedelta | None = None


@dataclass(kw_only=True)
class IndexTemplateGetReq:
    index_templates: list[str] = field(default_factory=list)
    params: IndexTemplateGetParams = field(default_factory=IndexTemplateGetParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "GET",
            build_path("_index_template", self.index_templates),
            params=self.params.get(),
            headers=self.headers,
        )


class IndexTemplateBody(BaseModel):
    mappings: dict[str, Any] | None = None
    settings: dict[str, Any] | None = None
    aliases: dict[str, Any] | None = None


class IndexTemplateDefinition(BaseModel):
    index_patterns: list[str] = Field(default_factory=list)
    template: IndexTemplateBody | None = None
    composed_of: list[str] = Field(default_factory=list)
    priority: int | None = None
    version: int | None = None
    data_stream: dict[str, Any] | None = None
    meta: dict[str, Any] | None = Field(default=None, alias="_meta")


class IndexTemplateDetails(BaseModel):
    name: str
    index_template: IndexTemplateDefinition


class IndexTemplateGetResp(ApiResponse):
    index_templates: list[IndexTemplateDetails] = Field(default_factory=list)


@dataclass(kw_only=True)
class IndexTemplateDeleteParams(Params):
    cluster_manager_timeout: timedelta | None = None
    master_timeout: timedelta | None = None
    timeout: timedelta | None = None


@dataclass(kw_only=True)
class IndexTemplateDeleteReq:
    index_template: str
    params: IndexTemplateDeleteParams = field(default_factory=IndexTemplateDeleteParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "DELETE",
            build_path("_index_template", required("index_template", self.index_template)),
            params=self.params.get(),
            headers=self.headers,
        )


class IndexTemplateDeleteResp(AcknowledgedResp):
    pass


@dataclass(kw_only=True)
class IndexTemplateExistsParams(IndexTemplateGetParams):
    pass


@dataclass(kw_only=True)
class IndexTemplateExistsReq:
    index_template: str
    params: IndexTemplateExistsParams = field(default_factory=IndexTemplateExistsParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "HEAD",
            build_path("_index_template", required("index_template", self.index_template)),
            params=self.params.get(),
            headers=self.headers,
        )


class IndexTemplateClient(SubClient):
    """Index template endpoints grouped under ``client.index_template``."""

    async def create(
        self, req: IndexTemplateCreateReq, *, timeout: float | None = None
    ) -> IndexTemplateCreateResp:
        data, _ = await self.client.do(req, IndexTemplateCreateResp, timeout=timeout)
        return data

    async def get(
        self, req: IndexTemplateGetReq | None = None, *, timeout: float | None = None
    ) -> IndexTemplateGetResp:
        data, _ = await self.client.do(
            req or IndexTemplateGetReq(), IndexTemplateGetResp, timeout=timeout
        )
        return data

    async def delete(
        self, req: IndexTemplateDeleteReq, *, timeout: float | None = None
    ) -> IndexTemplateDeleteResp:
        data, _ = await self.client.do(req, IndexTemplateDeleteResp, timeout=timeout)
        return data

    async def exists(
        self, req: IndexTemplateExistsReq, *, timeout: float | None = None
    ) -> Response:
        _, resp = await self.client.do(req, timeout=timeout)
        await resp.aclose()
        return resp
