"""Snapshot and snapshot repository endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING, Any, ClassVar

import httpx
from pydantic import BaseModel, Field

from ..params import Params
from ..request import build_path, build_request, required
from ..response import ApiResponse
from .common import AcknowledgedResp, KeyedResponse, SubClient

if TYPE_CHECKING:
    from ..client import Client


class SnapshotShards(BaseModel):
    total: int = 0
    failed: int = 0
    successful: int = 0


class SnapshotInfo(BaseModel):
    snapshot: str | None = None
    uuid: str | None = None
    version_id: int | None = None
    version: str | None = None
    remote_store_index_shallow_copy: bool | None = None
    indices: list[str] = Field(default_factory=list)
    data_streams: list[Any] = Field(default_factory=list)
    include_global_state: bool | None = None
    metadata: dict[str, Any] | None = None
    state: str | None = None
    start_time: str | None = None
    start_time_in_millis: int | None = None
    end_time: str | None = None
    end_time_in_millis: int | None = None
    duration_in_millis: int | None = None
    failures: list[Any] = Field(default_factory=list)
    shards: SnapshotShards | None = None


# Create


@dataclass(kw_only=True)
class SnapshotCreateParams(Params):
    cluster_manager_timeout: timedelta | None = None
    master_timeout: timedelta | None = None
    wait_for_completion: bool | None = None


@dataclass(kw_only=True)
class SnapshotCreateReq:
    repo: str
    snapshot: str
    body: Any = None
    params: SnapshotCreateParams = field(default_factory=SnapshotCreateParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "PUT",
            build_path(
                "_snapshot",
                required("repo", self.repo),
                required("snapshot", self.snapshot),
            ),
            self.body,
            self.params.get(),
            self.headers,
        )


class SnapshotCreateResp(ApiResponse):
    """``accepted`` without ``wait_for_completion``, the snapshot info with it."""

    accepted: bool | None = None
    snapshot: SnapshotInfo | None = None


# Get


@dataclass(kw_only=True)
class SnapshotGetParams(Params):
    cluster_manager_timeout: timedelta | None = None
    ignore_unavailable: bool | None = None
    master_timeout: timedelta | None = None
    verbose: bool | None = None


@dataclass(kw_only=True)
class SnapshotGetReq:
    repo: str
    snapshots: list[str]
    params: SnapshotGetParams = field(default_factory=SnapshotGetParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "GET",
            build_path(
                "_snapshot",
                required("repo", self.repo),
                required("snapshots", self.snapshots),
            ),
            params=self.params.get(),
            headers=self.headers,
        )


class SnapshotGetResp(ApiResponse):
    snapshots: list[SnapshotInfo] = Field(default_factory=list)


# Delete


@dataclass(kw_only=True)
class SnapshotDeleteParams(Params):
    cluster_manager_timeout: timedelta | None = None
    master_timeout: timedelta | None = None


@dataclass(kw_only=True)
class SnapshotDeleteReq:
    repo: str
    snapshots: list[str]
    params: SnapshotDeleteParams = field(default_factory=SnapshotDeleteParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "DELETE",
            build_path(
                "_snapshot",
                required("repo", self.repo),
                required("snapshots", self.snapshots),
            ),
            params=self.params.get(),
            headers=self.headers,
        )


class SnapshotDeleteResp(AcknowledgedResp):
    pass


# Restore


@dataclass(kw_only=True)
class SnapshotRestoreParams(Params):
    cluster_manager_timeout: timedelta | None = None
    master_timeout: timedelta | None = None
    wait_for_completion: bool | None = None


@dataclass(kw_only=True)
class SnapshotRestoreReq:
    repo: str
    snapshot: str
    body: Any = None
    params: SnapshotRestoreParams = field(default_factory=SnapshotRestoreParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "POST",
            build_path(
                "_snapshot",
                required("repo", self.repo),
                required("snapshot", self.snapshot),
                "_restore",
            ),
            self.body,
            self.params.get(),
            self.headers,
        )


class RestoredSnapshot(BaseModel):
    snapshot: str | None = None
    indices: list[str] = Field(default_factory=list)
    shards: SnapshotShards | None = None


class SnapshotRestoreResp(ApiResponse):
    accepted: bool | None = None
    snapshot: RestoredSnapshot | None = None


# Clone


@dataclass(kw_only=True)
class SnapshotCloneParams(Params):
    cluster_manager_timeout: timedelta | None = None
    master_timeout: timedelta | None = None


@dataclass(kw_only=True)
class SnapshotCloneReq:
    repo: str
    snapshot: str
    target_snapshot: str
    body: Any
    params: SnapshotCloneParams = field(default_factory=SnapshotCloneParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "PUT",
            build_path(
                "_snapshot",
                required("repo", self.repo),
                required("snapshot", self.snapshot),
                "_clone",
                required("target_snapshot", self.target_snapshot),
            ),
            self.body,
            self.params.get(),
            self.headers,
        )


class SnapshotCloneResp(AcknowledgedResp):
    pass


# Status


@dataclass(kw_only=True)
class SnapshotStatusParams(Params):
    cluster_manager_timeout: timedelta | None = None
    ignore_unavailable: bool | None = None
    master_timeout: timedelta | None = None


@dataclass(kw_only=True)
class SnapshotStatusReq:
    """Status of running snapshots, or of the named ones in ``repo``."""

    repo: str = ""
    snapshots: list[str] = field(default_factory=list)
    params: SnapshotStatusParams = field(default_factory=SnapshotStatusParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        if self.snapshots:
            required("repo", self.repo)
        return build_request(
            "GET",
            build_path("_snapshot", self.repo, self.snapshots, "_status"),
            params=self.params.get(),
            headers=self.headers,
        )


class SnapshotStatus(BaseModel):
    snapshot: str | None = None
    repository: str | None = None
    uuid: str | None = None
    state: str | None = None
    include_global_state: bool | None = None
    shards_stats: dict[str, int] | None = None
    stats: dict[str, Any] | None = None
    indices: dict[str, Any] = Field(default_factory=dict)


class SnapshotStatusResp(ApiResponse):
    snapshots: list[SnapshotStatus] = Field(default_factory=list)


# Repositories


@dataclass(kw_only=True)
class SnapshotRepositoryCreateParams(Params):
    cluster_manager_timeout: timedelta | None = None
    master_timeout: timedelta | None = None
    timeout: timedelta | None = None
    verify: bool | None = None


@dataclass(kw_only=True)
class SnapshotRepositoryCreateReq:
    repo: str
    body: Any
    params: SnapshotRepositoryCreateParams = field(
        default_factory=SnapshotRepositoryCreateParams
    )
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "PUT",
            build_path("_snapshot", required("repo", self.repo)),
            self.body,
            self.params.get(),
            self.headers,
        )


class SnapshotRepositoryCreateResp(AcknowledgedResp):
    pass


@dataclass(kw_only=True)
class SnapshotRepositoryGetParams(Params):
    cluster_manager_timeout: timedelta | None = None
    local: bool | None = None
    master_timeout: timedelta | None = None


@dataclass(kw_only=True)
class SnapshotRepositoryGetReq:
    repos: list[str] = field(default_factory=list)
    params: SnapshotRepositoryGetParams = field(default_factory=SnapshotRepositoryGetParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "GET",
            build_path("_snapshot", self.repos),
            params=self.params.get(),
            headers=self.headers,
        )


class SnapshotRepository(BaseModel):
    type: str | None = None
    settings: dict[str, Any] = Field(default_factory=dict)


class SnapshotRepositoryGetResp(KeyedResponse):
    root_field: ClassVar[str] = "repos"

    repos: dict[str, SnapshotRepository] = Field(default_factory=dict)


@dataclass(kw_only=True)
class SnapshotRepositoryDeleteParams(Params):
    cluster_manager_timeout: timedelta | None = None
    master_timeout: timedelta | None = None
    timeout: timedelta | None = None


@dataclass(kw_only=True)
class SnapshotRepositoryDeleteReq:
    repos: list[str]
    params: SnapshotRepositoryDeleteParams = field(
        default_factory=SnapshotRepositoryDeleteParams
    )
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "DELETE",
            build_path("_snapshot", required("repos", self.repos)),
            params=self.params.get(),
            headers=self.headers,
        )


class SnapshotRepositoryDeleteResp(AcknowledgedResp):
    pass


class RepositoryClient(SubClient):
    """Repository endpoints under ``client.snapshot.repository``."""

    async def create(
        self, req: SnapshotRepositoryCreateReq, *, timeout: float | None = None
    ) -> SnapshotRepositoryCreateResp:
        data, _ = await self.client.do(req, SnapshotRepositoryCreateResp, timeout=timeout)
        return data

    async def get(
        self, req: SnapshotRepositoryGetReq | None = None, *, timeout: float | None = None
    ) -> SnapshotRepositoryGetResp:
        data, _ = await self.client.do(
            req or SnapshotRepositoryGetReq(), SnapshotRepositoryGetResp, timeout=timeout
        )
        return data

    async def delete(
        self, req: SnapshotRepositoryDeleteReq, *, timeout: float | None = None
    ) -> SnapshotRepositoryDeleteResp:
        data, _ = await self.client.do(req, SnapshotRepositoryDeleteResp, timeout=timeout)
        return data


class SnapshotClient(SubClient):
    """Snapshot endpoints grouped under ``client.snapshot``."""

    def __init__(self, client: Client):
        super().__init__(client)
        self.repository = RepositoryClient(client)

    async def create(
        self, req: SnapshotCreateReq, *, timeout: float | None = None
    ) -> SnapshotCreateResp:
        data, _ = await self.client.do(req, SnapshotCreateResp, timeout=timeout)
        return data

    async def get(self, req: SnapshotGetReq, *, timeout: float | None = None) -> SnapshotGetResp:
        data, _ = await self.client.do(req, SnapshotGetResp, timeout=timeout)
        return data

    async def delete(
        self, req: SnapshotDeleteReq, *, timeout: float | None = None
    ) -> SnapshotDeleteResp:
        data, _ = await self.client.do(req, SnapshotDeleteResp, timeout=timeout)
        return data

    async def restore(
        self, req: SnapshotRestoreReq, *, timeout: float | None = None
    ) -> SnapshotRestoreResp:
        data, _ = await self.client.do(req, SnapshotRestoreResp, timeout=timeout)
        return data

    async def clone(
        self, req: SnapshotCloneReq, *, timeout: float | None = None
    ) -> SnapshotCloneResp:
        data, _ = await self.client.do(req, SnapshotCloneResp, timeout=timeout)
        return data

    async def status(
        self, req: SnapshotStatusReq | None = None, *, timeout: float | None = None
    ) -> SnapshotStatusResp:
        data, _ = await self.client.do(
            req or SnapshotStatusReq(), SnapshotStatusResp, timeout=timeout
        )
        return data
