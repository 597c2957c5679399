"""Single-document endpoints: index, create, get, exists, delete, update and mget."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

import httpx
from pydantic import BaseModel, Field

from ..params import Params, query_key
from ..request import build_path, build_request, required
from ..response import ApiResponse, Response
from .common import ResponseShards, SubClient


class DocumentWriteResp(ApiResponse):
    """Fields shared by every document write response."""

    index: str | None = Field(default=None, alias="_index")
    id: str | None = Field(default=None, alias="_id")
    version: int | None = Field(default=None, alias="_version")
    result: str | None = None
    shards: ResponseShards | None = Field(default=None, alias="_shards")
    seq_no: int | None = Field(default=None, alias="_seq_no")
    primary_term: int | None = Field(default=None, alias="_primary_term")
    forced_refresh: bool | None = None


# Index


@dataclass(kw_only=True)
class IndexParams(Params):
    if_primary_term: int | None = None
    if_seq_no: int | None = None
    op_type: str = ""
    pipeline: str = ""
    refresh: str = ""
    require_alias: bool | None = None
    routing: str = ""
    timeout: timedelta | None = None
    version: int | None = None
    version_type: str = ""
    wait_for_active_shards: str = ""


@dataclass(kw_only=True)
class IndexReq:
    """Index a document; without ``document_id`` the server picks one."""

    index: str
    document_id: str = ""
    body: Any = None
    params: IndexParams = field(default_factory=IndexParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        index = required("index", self.index)
        if self.document_id:
            method, path = "PUT", build_path(index, "_doc", self.document_id)
        else:
            method, path = "POST", build_path(index, "_doc")
        return build_request(
            method, path, self.body, self.params.get(), self.headers
        )


class IndexResp(DocumentWriteResp):
    pass


# Create


@dataclass(kw_only=True)
class DocumentCreateParams(Params):
    pipeline: str = ""
    refresh: str = ""
    routing: str = ""
    timeout: timedelta | None = None
    version: int | None = None
    version_type: str = ""
    wait_for_active_shards: str = ""


@dataclass(kw_only=True)
class DocumentCreateReq:
    """Create a document, failing if the id already exists."""

    index: str
    document_id: str
    body: Any = None
    params: DocumentCreateParams = field(default_factory=DocumentCreateParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "PUT",
            build_path(
                required("index", self.index),
                "_create",
                required("document_id", self.document_id),
            ),
            self.body,
            self.params.get(),
            self.headers,
        )


class DocumentCreateResp(DocumentWriteResp):
    pass


# Get / exists


@dataclass(kw_only=True)
class DocumentGetParams(Params):
    preference: str = ""
    realtime: bool | None = None
    refresh: bool | None = None
    routing: str = ""
    source: bool | list[str] | None = query_key("_source", default=None)
    source_excludes: list[str] = query_key("_source_excludes", default_factory=list)
    source_includes: list[str] = query_key("_source_includes", default_factory=list)
    stored_fields: list[str] = field(default_factory=list)
    version: int | None = None
    version_type: str = ""


@dataclass(kw_only=True)
class DocumentGetReq:
    index: str
    document_id: str
    params: DocumentGetParams = field(default_factory=DocumentGetParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "GET",
            build_path(
                required("index", self.index),
                "_doc",
                required("document_id", self.document_id),
            ),
            params=self.params.get(),
            headers=self.headers,
        )


class DocumentGetResp(ApiResponse):
    index: str | None = Field(default=None, alias="_index")
    id: str | None = Field(default=None, alias="_id")
    version: int | None = Field(default=None, alias="_version")
    seq_no: int | None = Field(default=None, alias="_seq_no")
    primary_term: int | None = Field(default=None, alias="_primary_term")
    found: bool = False
    source: Any = Field(default=None, alias="_source")


@dataclass(kw_only=True)
class DocumentExistsParams(DocumentGetParams):
    pass


@dataclass(kw_only=True)
class DocumentExistsReq:
    index: str
    document_id: str
    params: DocumentExistsParams = field(default_factory=DocumentExistsParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "HEAD",
            build_path(
                required("index", self.index),
                "_doc",
                required("document_id", self.document_id),
            ),
            params=self.params.get(),
            headers=self.headers,
        )


# Delete


@dataclass(kw_only=True)
class DocumentDeleteParams(Params):
    if_primary_term: int | None = None
    if_seq_no: int | None = None
    refresh: str = ""
    routing: str = ""
    timeout: timedelta | None = None
    version: int | None = None
    version_type: str = ""
    wait_for_active_shards: str = ""


@dataclass(kw_only=True)
class DocumentDeleteReq:
    index: str
    document_id: str
    params: DocumentDeleteParams = field(default_factory=DocumentDeleteParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "DELETE",
            build_path(
                required("index", self.index),
                "_doc",
                required("document_id", self.document_id),
            ),
            params=self.params.get(),
            headers=self.headers,
        )


class DocumentDeleteResp(DocumentWriteResp):
    pass


# Update


@dataclass(kw_only=True)
class UpdateParams(Params):
    if_primary_term: int | None = None
    if_seq_no: int | None = None
    lang: str = ""
    refresh: str = ""
    require_alias: bool | None = None
    retry_on_conflict: int | None = None
    routing: str = ""
    source: bool | list[str] | None = query_key("_source", default=None)
    source_excludes: list[str] = query_key("_source_excludes", default_factory=list)
    source_includes: list[str] = query_key("_source_includes", default_factory=list)
    timeout: timedelta | None = None
    wait_for_active_shards: str = ""


@dataclass(kw_only=True)
class UpdateReq:
    index: str
    document_id: str
    body: Any = None
    params: UpdateParams = field(default_factory=UpdateParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "POST",
            build_path(
                required("index", self.index),
                "_update",
                required("document_id", self.document_id),
            ),
            self.body,
            self.params.get(),
            self.headers,
        )


class UpdateResp(DocumentWriteResp):
    get: dict[str, Any] | None = None


# Multi-get


@dataclass(kw_only=True)
class MGetParams(Params):
    preference: str = ""
    realtime: bool | None = None
    refresh: bool | None = None
    routing: str = ""
    source: bool | list[str] | None = query_key("_source", default=None)
    source_excludes: list[str] = query_key("_source_excludes", default_factory=list)
    source_includes: list[str] = query_key("_source_includes", default_factory=list)
    stored_fields: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class MGetReq:
    """Fetch several documents; ``index`` is optional when the body names it."""

    index: str = ""
    body: Any = None
    params: MGetParams = field(default_factory=MGetParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "POST",
            build_path(self.index, "_mget"),
            self.body,
            self.params.get(),
            self.headers,
        )


class MGetDoc(BaseModel):
    index: str | None = Field(default=None, alias="_index")
    id: str | None = Field(default=None, alias="_id")
    version: int | None = Field(default=None, alias="_version")
    seq_no: int | None = Field(default=None, alias="_seq_no")
    primary_term: int | None = Field(default=None, alias="_primary_term")
    found: bool = False
    source: Any = Field(default=None, alias="_source")
    error: Any = None


class MGetResp(ApiResponse):
    docs: list[MGetDoc] = Field(default_factory=list)


class DocumentClient(SubClient):
    """Document endpoints grouped under ``client.document``."""

    async def create(
        self, req: DocumentCreateReq, *, timeout: float | None = None
    ) -> DocumentCreateResp:
        data, _ = await self.client.do(req, DocumentCreateResp, timeout=timeout)
        return data

    async def get(
        self, req: DocumentGetReq, *, timeout: float | None = None
    ) -> DocumentGetResp:
        data, _ = await self.client.do(req, DocumentGetResp, timeout=timeout)
        return data

    async def exists(
        self, req: DocumentExistsReq, *, timeout: float | None = None
    ) -> Response:
        """HEAD the document; check ``status_code`` (200 or 404)."""
        _, resp = await self.client.do(req, timeout=timeout)
        await resp.aclose()
        return resp

    async def delete(
        self, req: DocumentDeleteReq, *, timeout: float | None = None
    ) -> DocumentDeleteResp:
        data, _ = await self.client.do(req, DocumentDeleteResp, timeout=timeout)
        return data

    async def index(self, req: IndexReq, *, timeout: float | None = None) -> IndexResp:
        return await self.client.index(req, timeout=timeout)

    async def update(self, req: UpdateReq, *, timeout: float | None = None) -> UpdateResp:
        return await self.client.update(req, timeout=timeout)

    async def mget(self, req: MGetReq, *, timeout: float | None = None) -> MGetResp:
        return await self.client.mget(req, timeout=timeout)
