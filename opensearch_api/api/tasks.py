"""Task management endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

import httpx
from pydantic import BaseModel, Field

from ..params import Params
from ..request import build_path, build_request, required
from ..response import ApiResponse
from .common import SubClient


class ResourceUsage(BaseModel):
    cpu_time_in_nanos: int = 0
    memory_in_bytes: int = 0


class ResourceStats(BaseModel):
    average: ResourceUsage | None = None
    total: ResourceUsage | None = None
    min: ResourceUsage | None = None
    max: ResourceUsage | None = None
    thread_info: dict[str, int] | None = None


class TaskInfo(BaseModel):
    node: str | None = None
    id: int | None = None
    type: str | None = None
    action: str | None = None
    description: str | None = None
    start_time_in_millis: int | None = None
    running_time_in_nanos: int | None = None
    cancellation_time_millis: int | None = None
    cancellable: bool = False
    cancelled: bool = False
    headers: dict[str, str] = Field(default_factory=dict)
    resource_stats: ResourceStats | None = None
    parent_task_id: str | None = None
    children: list[TaskInfo] = Field(default_factory=list)


class TaskNode(BaseModel):
    name: str | None = None
    transport_address: str | None = None
    host: str | None = None
    ip: str | None = None
    roles: list[str] = Field(default_factory=list)
    attributes: dict[str, str] = Field(default_factory=dict)
    tasks: dict[str, TaskInfo] = Field(default_factory=dict)


@dataclass(kw_only=True)
class TasksListParams(Params):
    actions: list[str] = field(default_factory=list)
    detailed: bool | None = None
    group_by: str = ""
    nodes: list[str] = field(default_factory=list)
    parent_task_id: str = ""
    timeout: timedelta | None = None
    wait_for_completion: bool | None = None


@dataclass(kw_only=True)
class TasksListReq:
    params: TasksListParams = field(default_factory=TasksListParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request("GET", "/_tasks", params=self.params.get(), headers=self.headers)


class TasksListResp(ApiResponse):
    """Tasks grouped by node, or flat in ``tasks`` when ``group_by`` is set."""

    nodes: dict[str, TaskNode] = Field(default_factory=dict)
    tasks: Any = None
    node_failures: list[Any] = Field(default_factory=list)
    task_failures: list[Any] = Field(default_factory=list)


@dataclass(kw_only=True)
class TasksGetParams(Params):
    timeout: timedelta | None = None
    wait_for_completion: bool | None = None


@dataclass(kw_only=True)
class TasksGetReq:
    task_id: str
    params: TasksGetParams = field(default_factory=TasksGetParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "GET",
            build_path("_tasks", required("task_id", self.task_id)),
            params=self.params.get(),
            headers=self.headers,
        )


class TasksGetResp(ApiResponse):
    completed: bool = False
    task: TaskInfo | None = None
    response: Any = None
    error: Any = None


@dataclass(kw_only=True)
class TasksCancelParams(Params):
    actions: list[str] = field(default_factory=list)
    nodes: list[str] = field(default_factory=list)
    parent_task_id: str = ""
    wait_for_completion: bool | None = None


@dataclass(kw_only=True)
class TasksCancelReq:
    """Cancel one task, or every task matching the params when ``task_id`` is empty."""

    task_id: str = ""
    params: TasksCancelParams = field(default_factory=TasksCancelParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "POST",
            build_path("_tasks", self.task_id, "_cancel"),
            params=self.params.get(),
            headers=self.headers,
        )


class TasksCancelResp(ApiResponse):
    nodes: dict[str, TaskNode] = Field(default_factory=dict)
    node_failures: list[Any] = Field(default_factory=list)
    task_failures: list[Any] = Field(default_factory=list)


class TasksClient(SubClient):
    """Task endpoints grouped under ``client.tasks``."""

    async def list(
        self, req: TasksListReq | None = None, *, timeout: float | None = None
    ) -> TasksListResp:
        data, _ = await self.client.do(req or TasksListReq(), TasksListResp, timeout=timeout)
        return data

    async def get(self, req: TasksGetReq, *, timeout: float | None = None) -> TasksGetResp:
        data, _ = await self.client.do(req, TasksGetResp, timeout=timeout)
        return data

    async def cancel(
        self, req: TasksCancelReq | None = None, *, timeout: float | None = None
    ) -> TasksCancelResp:
        data, _ = await self.client.do(
            req or TasksCancelReq(), TasksCancelResp, timeout=timeout
        )
        return data
