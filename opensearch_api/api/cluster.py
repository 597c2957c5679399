"""Cluster health and cluster-wide settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

import httpx
from pydantic import Field

from ..params import Params
from ..request import build_path, build_request
from ..response import ApiResponse
from .common import AcknowledgedResp, SubClient


@dataclass(kw_only=True)
class ClusterHealthParams(Params):
    awareness_attribute: str = ""
    cluster_manager_timeout: timedelta | None = None
    expand_wildcards: str = ""
    level: str = ""
    local: bool | None = None
    master_timeout: timedelta | None = None
    timeout: timedelta | None = None
    wait_for_active_shards: str = ""
    wait_for_events: str = ""
    wait_for_no_initializing_shards: bool | None = None
    wait_for_no_relocating_shards: bool | None = None
    wait_for_nodes: str = ""
    wait_for_status: str = ""


@dataclass(kw_only=True)
class ClusterHealthReq:
    indices: list[str] = field(default_factory=list)
    params: ClusterHealthParams = field(default_factory=ClusterHealthParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "GET",
            build_path("_cluster", "health", self.indices),
            params=self.params.get(),
            headers=self.headers,
        )


class ClusterHealthResp(ApiResponse):
    cluster_name: str | None = None
    status: str | None = None
    timed_out: bool = False
    number_of_nodes: int | None = None
    number_of_data_nodes: int | None = None
    discovered_master: bool | None = None
    discovered_cluster_manager: bool | None = None
    active_primary_shards: int | None = None
    active_shards: int | None = None
    relocating_shards: int | None = None
    initializing_shards: int | None = None
    unassigned_shards: int | None = None
    delayed_unassigned_shards: int | None = None
    number_of_pending_tasks: int | None = None
    number_of_in_flight_fetch: int | None = None
    task_max_waiting_in_queue_millis: int | None = None
    active_shards_percent_as_number: float | None = None
    indices: dict[str, Any] | None = None


@dataclass(kw_only=True)
class ClusterGetSettingsParams(Params):
    cluster_manager_timeout: timedelta | None = None
    flat_settings: bool | None = None
    include_defaults: bool | None = None
    master_timeout: timedelta | None = None
    timeout: timedelta | None = None


@dataclass(kw_only=True)
class ClusterGetSettingsReq:
    params: ClusterGetSettingsParams = field(default_factory=ClusterGetSettingsParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "GET", "/_cluster/settings", params=self.params.get(), headers=self.headers
        )


class ClusterGetSettingsResp(ApiResponse):
    persistent: dict[str, Any] = Field(default_factory=dict)
    transient: dict[str, Any] = Field(default_factory=dict)
    defaults: dict[str, Any] | None = None


@dataclass(kw_only=True)
class ClusterPutSettingsParams(Params):
    cluster_manager_timeout: timedelta | None = None
    flat_settings: bool | None = None
    master_timeout: timedelta | None = None
    timeout: timedelta | None = None


@dataclass(kw_only=True)
class ClusterPutSettingsReq:
    body: Any
    params: ClusterPutSettingsParams = field(default_factory=ClusterPutSettingsParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "PUT", "/_cluster/settings", self.body, self.params.get(), self.headers
        )


class ClusterPutSettingsResp(AcknowledgedResp):
    persistent: dict[str, Any] = Field(default_factory=dict)
    transient: dict[str, Any] = Field(default_factory=dict)


class ClusterClient(SubClient):
    """Cluster endpoints grouped under ``client.cluster``."""

    async def health(
        self, req: ClusterHealthReq | None = None, *, timeout: float | None = None
    ) -> ClusterHealthResp:
        data, _ = await self.client.do(
            req or ClusterHealthReq(), ClusterHealthResp, timeout=timeout
        )
        return data

    async def get_settings(
        self, req: ClusterGetSettingsReq | None = None, *, timeout: float | None = None
    ) -> ClusterGetSettingsResp:
        data, _ = await self.client.do(
            req or ClusterGetSettingsReq(), ClusterGetSettingsResp, timeout=timeout
        )
        return data

    async def put_settings(
        self, req: ClusterPutSettingsReq, *, timeout: float | None = None
    ) -> ClusterPutSettingsResp:
        data, _ = await self.client.do(req, ClusterPutSettingsResp, timeout=timeout)
        return data
