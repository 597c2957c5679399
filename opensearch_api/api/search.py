"""Search and scroll endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

import httpx
from pydantic import BaseModel, Field

from ..params import Params, query_key
from ..request import build_path, build_request, required
from ..response import ApiResponse
from .common import ResponseShards, SubClient


@dataclass(kw_only=True)
class SearchParams(Params):
    allow_no_indices: bool | None = None
    allow_partial_search_results: bool | None = None
    analyzer: str = ""
    analyze_wildcard: bool | None = None
    batched_reduce_size: int | None = None
    ccs_minimize_roundtrips: bool | None = None
    default_operator: str = ""
    df: str = ""
    docvalue_fields: list[str] = field(default_factory=list)
    expand_wildcards: str = ""
    explain: bool | None = None
    from_: int | None = query_key("from", default=None)
    ignore_throttled: bool | None = None
    ignore_unavailable: bool | None = None
    lenient: bool | None = None
    max_concurrent_shard_requests: int | None = None
    min_compatible_shard_node: str = ""
    preference: str = ""
    pre_filter_shard_size: int | None = None
    query: str = query_key("q", default="")
    request_cache: bool | None = None
    rest_total_hits_as_int: bool | None = None
    routing: list[str] = field(default_factory=list)
    scroll: timedelta | None = None
    search_pipeline: str = ""
    search_type: str = ""
    seq_no_primary_term: bool | None = None
    size: int | None = None
    sort: list[str] = field(default_factory=list)
    source: bool | list[str] | None = query_key("_source", default=None)
    source_excludes: list[str] = query_key("_source_excludes", default_factory=list)
    source_includes: list[str] = query_key("_source_includes", default_factory=list)
    stats: list[str] = field(default_factory=list)
    stored_fields: list[str] = field(default_factory=list)
    suggest_field: str = ""
    suggest_mode: str = ""
    suggest_size: int | None = None
    suggest_text: str = ""
    terminate_after: int | None = None
    timeout: timedelta | None = None
    track_scores: bool | None = None
    track_total_hits: Any = None
    typed_keys: bool | None = None
    version: bool | None = None


@dataclass(kw_only=True)
class SearchReq:
    """Search across ``indices``, or every index when the list is empty."""

    indices: list[str] = field(default_factory=list)
    body: Any = None
    params: SearchParams = field(default_factory=SearchParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "POST",
            build_path(self.indices, "_search"),
            self.body,
            self.params.get(),
            self.headers,
        )


class SearchHit(BaseModel):
    index: str | None = Field(default=None, alias="_index")
    id: str | None = Field(default=None, alias="_id")
    routing: str | None = Field(default=None, alias="_routing")
    score: float | None = Field(default=None, alias="_score")
    source: Any = Field(default=None, alias="_source")
    fields: dict[str, Any] | None = None
    sort: list[Any] | None = None
    explanation: dict[str, Any] | None = Field(default=None, alias="_explanation")
    seq_no: int | None = Field(default=None, alias="_seq_no")
    primary_term: int | None = Field(default=None, alias="_primary_term")
    highlight: dict[str, list[str]] | None = None
    matched_queries: list[str] | None = None


class HitsTotal(BaseModel):
    value: int = 0
    relation: str | None = None


class SearchHits(BaseModel):
    total: HitsTotal | None = None
    max_score: float | None = None
    hits: list[SearchHit] = Field(default_factory=list)


class SuggestOption(BaseModel):
    text: str | None = None
    score: float | None = None
    freq: int | None = None
    highlighted: str | None = None
    collate_match: bool | None = None


class Suggest(BaseModel):
    text: str | None = None
    offset: int | None = None
    length: int | None = None
    options: list[SuggestOption] = Field(default_factory=list)


class SearchResp(ApiResponse):
    took: int | None = None
    timed_out: bool = False
    shards: ResponseShards | None = Field(default=None, alias="_shards")
    hits: SearchHits = Field(default_factory=SearchHits)
    aggregations: dict[str, Any] | None = None
    scroll_id: str | None = Field(default=None, alias="_scroll_id")
    suggest: dict[str, list[Suggest]] | None = None
    pit_id: str | None = None


# Scroll


@dataclass(kw_only=True)
class ScrollGetParams(Params):
    scroll: timedelta | None = None
    rest_total_hits_as_int: bool | None = None


@dataclass(kw_only=True)
class ScrollGetReq:
    """Fetch the next page of a scroll."""

    scroll_id: str
    params: ScrollGetParams = field(default_factory=ScrollGetParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "POST",
            "/_search/scroll",
            {"scroll_id": required("scroll_id", self.scroll_id)},
            self.params.get(),
            self.headers,
        )


class ScrollGetResp(ApiResponse):
    took: int | None = None
    timed_out: bool = False
    shards: ResponseShards | None = Field(default=None, alias="_shards")
    hits: SearchHits = Field(default_factory=SearchHits)
    scroll_id: str | None = Field(default=None, alias="_scroll_id")
    terminated_early: bool | None = None


@dataclass(kw_only=True)
class ScrollDeleteParams(Params):
    pass


@dataclass(kw_only=True)
class ScrollDeleteReq:
    """Clear the given scroll ids, or the ones named in ``body``."""

    scroll_ids: list[str] = field(default_factory=list)
    body: Any = None
    params: ScrollDeleteParams = field(default_factory=ScrollDeleteParams)
    headers: dict[str, str] | None = None

    def get_request(self) -> httpx.Request:
        return build_request(
            "DELETE",
            build_path("_search", "scroll", self.scroll_ids),
            self.body,
            self.params.get(),
            self.headers,
        )


class ScrollDeleteResp(ApiResponse):
    num_freed: int = 0
    succeeded: bool = False


class ScrollClient(SubClient):
    async def get(self, req: ScrollGetReq, *, timeout: float | None = None) -> ScrollGetResp:
        data, _ = await self.client.do(req, ScrollGetResp, timeout=timeout)
        return data

    async def delete(
        self, req: ScrollDeleteReq | None = None, *, timeout: float | None = None
    ) -> ScrollDeleteResp:
        data, _ = await self.client.do(
            req or ScrollDeleteReq(), ScrollDeleteResp, timeout=timeout
        )
        return data
