"""Tests for endpoint descriptors and the typed endpoint families."""

import json
from datetime import timedelta

import pytest

from opensearch_api.api.cluster import (
    ClusterGetSettingsReq,
    ClusterHealthParams,
    ClusterHealthReq,
    ClusterPutSettingsReq,
)
from opensearch_api.api.document import (
    DocumentCreateReq,
    DocumentDeleteReq,
    DocumentExistsReq,
    DocumentGetParams,
    DocumentGetReq,
    IndexReq,
    MGetReq,
    UpdateReq,
)
from opensearch_api.api.index_template import (
    IndexTemplateCreateReq,
    IndexTemplateDeleteReq,
    IndexTemplateExistsReq,
    IndexTemplateGetReq,
)
from opensearch_api.api.indices import (
    AliasDeleteReq,
    AliasGetReq,
    AliasPutReq,
    IndicesCreateReq,
    IndicesDeleteReq,
    IndicesExistsReq,
    IndicesGetReq,
    IndicesRefreshReq,
    MappingGetReq,
    MappingPutReq,
    SettingsGetReq,
    SettingsPutReq,
)
from opensearch_api.api.info import InfoReq, PingReq
from opensearch_api.api.migration import ColdToWarmReq, WarmToColdReq
from opensearch_api.api.point_in_time import (
    PointInTimeCreateParams,
    PointInTimeCreateReq,
    PointInTimeDeleteReq,
    PointInTimeGetReq,
)
from opensearch_api.api.search import (
    ScrollDeleteReq,
    ScrollGetParams,
    ScrollGetReq,
    SearchParams,
    SearchReq,
)
from opensearch_api.api.snapshot import (
    SnapshotCloneReq,
    SnapshotCreateReq,
    SnapshotDeleteReq,
    SnapshotGetReq,
    SnapshotRepositoryCreateReq,
    SnapshotRepositoryDeleteReq,
    SnapshotRepositoryGetReq,
    SnapshotRestoreReq,
    SnapshotStatusReq,
)
from opensearch_api.api.tasks import TasksCancelParams, TasksCancelReq, TasksGetReq, TasksListReq
from opensearch_api.client import Client
from opensearch_api.errors import BuildError
from tests.helpers import FakeTransport, make_response

ROUTES = [
    # root
    (InfoReq(), "GET", "/"),
    (PingReq(), "HEAD", "/"),
    # documents
    (IndexReq(index="movies", document_id="1", body={}), "PUT", "/movies/_doc/1"),
    (IndexReq(index="movies", body={}), "POST", "/movies/_doc"),
    (DocumentCreateReq(index="movies", document_id="1", body={}), "PUT", "/movies/_create/1"),
    (DocumentGetReq(index="movies", document_id="1"), "GET", "/movies/_doc/1"),
    (DocumentExistsReq(index="movies", document_id="1"), "HEAD", "/movies/_doc/1"),
    (DocumentDeleteReq(index="movies", document_id="1"), "DELETE", "/movies/_doc/1"),
    (UpdateReq(index="movies", document_id="1", body={}), "POST", "/movies/_update/1"),
    (MGetReq(index="movies", body={}), "POST", "/movies/_mget"),
    (MGetReq(body={}), "POST", "/_mget"),
    # search and scroll
    (SearchReq(), "POST", "/_search"),
    (SearchReq(indices=["movies", "books"]), "POST", "/movies,books/_search"),
    (ScrollGetReq(scroll_id="abc"), "POST", "/_search/scroll"),
    (ScrollDeleteReq(scroll_ids=["a", "b"]), "DELETE", "/_search/scroll/a,b"),
    (ScrollDeleteReq(), "DELETE", "/_search/scroll"),
    # indices
    (IndicesCreateReq(index="movies"), "PUT", "/movies"),
    (IndicesGetReq(indices=["movies"]), "GET", "/movies"),
    (IndicesDeleteReq(indices=["movies", "books"]), "DELETE", "/movies,books"),
    (IndicesExistsReq(indices=["movies"]), "HEAD", "/movies"),
    (IndicesRefreshReq(), "POST", "/_refresh"),
    (IndicesRefreshReq(indices=["movies"]), "POST", "/movies/_refresh"),
    (AliasPutReq(indices=["movies"], alias="films"), "PUT", "/movies/_alias/films"),
    (AliasGetReq(), "GET", "/_alias"),
    (AliasGetReq(indices=["movies"], alias=["films"]), "GET", "/movies/_alias/films"),
    (AliasDeleteReq(indices=["movies"], alias=["films"]), "DELETE", "/movies/_alias/films"),
    (SettingsGetReq(), "GET", "/_settings"),
    (
        SettingsGetReq(indices=["movies"], settings=["index.number_of_shards"]),
        "GET",
        "/movies/_settings/index.number_of_shards",
    ),
    (SettingsPutReq(indices=["movies"], body={}), "PUT", "/movies/_settings"),
    (MappingGetReq(indices=["movies"]), "GET", "/movies/_mapping"),
    (MappingPutReq(indices=["movies"], body={}), "PUT", "/movies/_mapping"),
    # index templates
    (IndexTemplateCreateReq(index_template="tpl", body={}), "PUT", "/_index_template/tpl"),
    (IndexTemplateGetReq(), "GET", "/_index_template"),
    (IndexTemplateGetReq(index_templates=["a", "b"]), "GET", "/_index_template/a,b"),
    (IndexTemplateDeleteReq(index_template="tpl"), "DELETE", "/_index_template/tpl"),
    (IndexTemplateExistsReq(index_template="tpl"), "HEAD", "/_index_template/tpl"),
    # cluster
    (ClusterHealthReq(), "GET", "/_cluster/health"),
    (ClusterHealthReq(indices=["movies"]), "GET", "/_cluster/health/movies"),
    (ClusterGetSettingsReq(), "GET", "/_cluster/settings"),
    (ClusterPutSettingsReq(body={}), "PUT", "/_cluster/settings"),
    # tasks
    (TasksListReq(), "GET", "/_tasks"),
    (TasksGetReq(task_id="node1:42"), "GET", "/_tasks/node1:42"),
    (TasksCancelReq(task_id="node1:42"), "POST", "/_tasks/node1:42/_cancel"),
    (TasksCancelReq(), "POST", "/_tasks/_cancel"),
    # snapshots
    (SnapshotCreateReq(repo="backups", snapshot="s1"), "PUT", "/_snapshot/backups/s1"),
    (SnapshotGetReq(repo="backups", snapshots=["s1", "s2"]), "GET", "/_snapshot/backups/s1,s2"),
    (SnapshotDeleteReq(repo="backups", snapshots=["s1"]), "DELETE", "/_snapshot/backups/s1"),
    (
        SnapshotRestoreReq(repo="backups", snapshot="s1"),
        "POST",
        "/_snapshot/backups/s1/_restore",
    ),
    (
        SnapshotCloneReq(repo="backups", snapshot="s1", target_snapshot="s2", body={}),
        "PUT",
        "/_snapshot/backups/s1/_clone/s2",
    ),
    (SnapshotStatusReq(), "GET", "/_snapshot/_status"),
    (
        SnapshotStatusReq(repo="backups", snapshots=["s1"]),
        "GET",
        "/_snapshot/backups/s1/_status",
    ),
    (SnapshotRepositoryCreateReq(repo="backups", body={}), "PUT", "/_snapshot/backups"),
    (SnapshotRepositoryGetReq(), "GET", "/_snapshot"),
    (SnapshotRepositoryGetReq(repos=["backups"]), "GET", "/_snapshot/backups"),
    (SnapshotRepositoryDeleteReq(repos=["backups"]), "DELETE", "/_snapshot/backups"),
    # point in time
    (
        PointInTimeCreateReq(indices=["movies"]),
        "POST",
        "/movies/_search/point_in_time",
    ),
    (PointInTimeGetReq(), "GET", "/_search/point_in_time/_all"),
    (PointInTimeDeleteReq(), "DELETE", "/_search/point_in_time"),
    # migration
    (ColdToWarmReq(), "POST", "/_cold/migration/_warm"),
    (WarmToColdReq(index="logs"), "POST", "/_ultrawarm/migration/logs/_cold"),
]


class TestRoutes:
    """Test every descriptor builds the documented method and path."""

    @pytest.mark.parametrize(
        "req,method,path",
        ROUTES,
        ids=[f"{type(r).__name__}-{p}" for r, _, p in ROUTES],
    )
    def test_route(self, req, method, path):
        request = req.get_request()
        assert request.method == method
        assert request.url.path == path
        assert not request.url.is_absolute_url

    def test_document_id_is_escaped(self):
        """Test ids with reserved characters stay in one path segment."""
        request = DocumentGetReq(index="movies", document_id="a/b?c").get_request()
        assert request.url.raw_path == b"/movies/_doc/a%2Fb%3Fc"


MISSING_PATH_VALUES = [
    (IndexReq(index="", body={}), "index"),
    (DocumentGetReq(index="movies", document_id=""), "document_id"),
    (DocumentExistsReq(index="", document_id="1"), "index"),
    (DocumentDeleteReq(index="movies", document_id=""), "document_id"),
    (UpdateReq(index="movies", document_id="", body={}), "document_id"),
    (IndicesCreateReq(index=""), "index"),
    (IndicesGetReq(indices=[]), "indices"),
    (IndicesDeleteReq(indices=[]), "indices"),
    (IndicesExistsReq(indices=[]), "indices"),
    (IndicesDeleteReq(indices=["movies", ""]), "indices"),
    (AliasPutReq(indices=["movies"], alias=""), "alias"),
    (AliasDeleteReq(indices=[], alias=["a"]), "indices"),
    (MappingPutReq(indices=[], body={}), "indices"),
    (IndexTemplateDeleteReq(index_template=""), "index_template"),
    (TasksGetReq(task_id=""), "task_id"),
    (SnapshotCreateReq(repo="", snapshot="s1"), "repo"),
    (SnapshotDeleteReq(repo="backups", snapshots=[]), "snapshots"),
    (SnapshotCloneReq(repo="b", snapshot="s1", target_snapshot="", body={}), "target_snapshot"),
    (SnapshotStatusReq(snapshots=["s1"]), "repo"),
    (SnapshotRepositoryDeleteReq(repos=[]), "repos"),
    (ScrollGetReq(scroll_id=""), "scroll_id"),
    (PointInTimeCreateReq(indices=[]), "indices"),
    (WarmToColdReq(index=""), "index"),
]


class TestRequiredSlots:
    """Test empty mandatory path values fail instead of reaching another endpoint."""

    @pytest.mark.parametrize(
        "req,name",
        MISSING_PATH_VALUES,
        ids=[f"{type(r).__name__}-{n}" for r, n in MISSING_PATH_VALUES],
    )
    def test_missing_value_raises(self, req, name):
        with pytest.raises(BuildError, match=f"missing required path value: {name}$"):
            req.get_request()


class TestBodies:
    """Test bodies built by descriptors themselves."""

    def test_scroll_get_sends_scroll_id(self):
        request = ScrollGetReq(
            scroll_id="abc", params=ScrollGetParams(scroll=timedelta(minutes=1))
        ).get_request()

        assert json.loads(request.content) == {"scroll_id": "abc"}
        assert request.url.params["scroll"] == "60000ms"

    def test_point_in_time_delete_with_ids(self):
        request = PointInTimeDeleteReq(pit_id=["p1", "p2"]).get_request()

        assert json.loads(request.content) == {"pit_id": ["p1", "p2"]}
        assert request.headers["Content-Type"] == "application/json"

    def test_point_in_time_delete_without_ids(self):
        """Test no body is sent when no ids are given."""
        request = PointInTimeDeleteReq().get_request()

        assert request.content == b""
        assert "Content-Type" not in request.headers

    def test_head_requests_have_no_body(self):
        request = IndicesExistsReq(indices=["movies"]).get_request()
        assert request.content == b""


class TestQueryParams:
    """Test descriptors attach their params to the query string."""

    def test_search_params(self):
        request = SearchReq(
            indices=["movies"],
            params=SearchParams(size=5, from_=10, source=["title"]),
        ).get_request()

        assert dict(request.url.params) == {"size": "5", "from": "10", "_source": "title"}

    def test_document_get_params(self):
        request = DocumentGetReq(
            index="movies",
            document_id="1",
            params=DocumentGetParams(realtime=False, stored_fields=["a", "b"]),
        ).get_request()

        assert dict(request.url.params) == {"realtime": "false", "stored_fields": "a,b"}

    def test_cluster_health_params(self):
        request = ClusterHealthReq(
            params=ClusterHealthParams(wait_for_status="yellow", timeout=timedelta(seconds=5))
        ).get_request()

        assert dict(request.url.params) == {"wait_for_status": "yellow", "timeout": "5000ms"}

    def test_tasks_cancel_params(self):
        request = TasksCancelReq(
            params=TasksCancelParams(actions=["*reindex"], nodes=["n1", "n2"])
        ).get_request()

        assert dict(request.url.params) == {"actions": "*reindex", "nodes": "n1,n2"}

    def test_point_in_time_create_params(self):
        request = PointInTimeCreateReq(
            indices=["movies"],
            params=PointInTimeCreateParams(keep_alive=timedelta(minutes=5)),
        ).get_request()

        assert dict(request.url.params) == {"keep_alive": "300000ms"}


class TestFamilies:
    """Test the typed endpoint families decode their responses."""

    @pytest.mark.asyncio
    async def test_search(self):
        transport = FakeTransport(
            make_response(
                200,
                {
                    "took": 3,
                    "timed_out": False,
                    "_shards": {"total": 1, "successful": 1, "skipped": 0, "failed": 0},
                    "hits": {
                        "total": {"value": 1, "relation": "eq"},
                        "max_score": 1.0,
                        "hits": [
                            {
                                "_index": "movies",
                                "_id": "1",
                                "_score": 1.0,
                                "_source": {"title": "Moneyball"},
                            }
                        ],
                    },
                    "_scroll_id": "scroll-1",
                },
            )
        )
        client = Client(transport=transport)

        resp = await client.search(SearchReq(indices=["movies"], body={"query": {}}))

        assert resp.took == 3
        assert resp.hits.total.value == 1
        assert resp.hits.hits[0].id == "1"
        assert resp.hits.hits[0].source == {"title": "Moneyball"}
        assert resp.scroll_id == "scroll-1"

    @pytest.mark.asyncio
    async def test_scroll_delete(self):
        transport = FakeTransport(make_response(200, {"succeeded": True, "num_freed": 2}))
        client = Client(transport=transport)

        resp = await client.scroll.delete(ScrollDeleteReq(scroll_ids=["a", "b"]))

        assert resp.succeeded is True
        assert resp.num_freed == 2

    @pytest.mark.asyncio
    async def test_document_get(self):
        transport = FakeTransport(
            make_response(
                200,
                {"_index": "movies", "_id": "1", "found": True, "_source": {"title": "x"}},
            )
        )
        client = Client(transport=transport)

        resp = await client.document.get(DocumentGetReq(index="movies", document_id="1"))

        assert resp.found is True
        assert resp.source == {"title": "x"}

    @pytest.mark.asyncio
    async def test_mget_through_document_family(self):
        transport = FakeTransport(
            make_response(200, {"docs": [{"_id": "1", "found": True}, {"_id": "2", "found": False}]})
        )
        client = Client(transport=transport)

        resp = await client.document.mget(MGetReq(index="movies", body={"ids": ["1", "2"]}))

        assert [doc.found for doc in resp.docs] == [True, False]

    @pytest.mark.asyncio
    async def test_cluster_health(self):
        transport = FakeTransport(
            make_response(200, {"cluster_name": "c", "status": "green", "number_of_nodes": 3})
        )
        client = Client(transport=transport)

        resp = await client.cluster.health()

        assert resp.status == "green"
        assert resp.number_of_nodes == 3

    @pytest.mark.asyncio
    async def test_tasks_get(self):
        transport = FakeTransport(
            make_response(
                200,
                {
                    "completed": True,
                    "task": {
                        "node": "n1",
                        "id": 42,
                        "action": "indices:data/write/reindex",
                        "cancellable": True,
                    },
                },
            )
        )
        client = Client(transport=transport)

        resp = await client.tasks.get(TasksGetReq(task_id="n1:42"))

        assert resp.completed is True
        assert resp.task.id == 42
        assert resp.task.cancellable is True

    @pytest.mark.asyncio
    async def test_tasks_list(self):
        transport = FakeTransport(
            make_response(
                200,
                {
                    "nodes": {
                        "n1": {
                            "name": "node-1",
                            "roles": ["data"],
                            "tasks": {"n1:1": {"node": "n1", "id": 1, "action": "a"}},
                        }
                    }
                },
            )
        )
        client = Client(transport=transport)

        resp = await client.tasks.list()

        assert resp.nodes["n1"].tasks["n1:1"].action == "a"

    @pytest.mark.asyncio
    async def test_snapshot_repository_get_is_keyed(self):
        """Test repository bodies keyed by name land in ``repos``."""
        transport = FakeTransport(
            make_response(200, {"backups": {"type": "fs", "settings": {"location": "/mnt"}}})
        )
        client = Client(transport=transport)

        resp = await client.snapshot.repository.get(SnapshotRepositoryGetReq(repos=["backups"]))

        assert resp.repos["backups"].type == "fs"
        assert resp.repos["backups"].settings == {"location": "/mnt"}

    @pytest.mark.asyncio
    async def test_snapshot_get(self):
        transport = FakeTransport(
            make_response(
                200, {"snapshots": [{"snapshot": "s1", "state": "SUCCESS", "indices": ["a"]}]}
            )
        )
        client = Client(transport=transport)

        resp = await client.snapshot.get(SnapshotGetReq(repo="backups", snapshots=["s1"]))

        assert resp.snapshots[0].state == "SUCCESS"

    @pytest.mark.asyncio
    async def test_point_in_time_lifecycle(self):
        transport = FakeTransport(
            make_response(200, {"pit_id": "p1", "creation_time": 1700000000000})
        )
        client = Client(transport=transport)

        created = await client.point_in_time.create(PointInTimeCreateReq(indices=["movies"]))
        assert created.pit_id == "p1"

        transport.response = make_response(200, {"pits": [{"pit_id": "p1", "successful": True}]})
        deleted = await client.point_in_time.delete(PointInTimeDeleteReq(pit_id=["p1"]))
        assert deleted.pits[0].successful is True

    @pytest.mark.asyncio
    async def test_index_template_get(self):
        transport = FakeTransport(
            make_response(
                200,
                {
                    "index_templates": [
                        {
                            "name": "tpl",
                            "index_template": {
                                "index_patterns": ["logs-*"],
                                "priority": 1,
                                "_meta": {"owner": "ops"},
                            },
                        }
                    ]
                },
            )
        )
        client = Client(transport=transport)

        resp = await client.index_template.get()

        template = resp.index_templates[0]
        assert template.name == "tpl"
        assert template.index_template.index_patterns == ["logs-*"]
        assert template.index_template.meta == {"owner": "ops"}

    @pytest.mark.asyncio
    async def test_index_template_exists_missing(self):
        client = Client(transport=FakeTransport(make_response(404)))

        resp = await client.index_template.exists(IndexTemplateExistsReq(index_template="nope"))

        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_migration(self):
        transport = FakeTransport(make_response(200, {"acknowledged": True}))
        client = Client(transport=transport)

        resp = await client.migration.warm_to_cold(WarmToColdReq(index="logs"))

        assert resp.acknowledged is True
        assert transport.last.url.path == "/_ultrawarm/migration/logs/_cold"

    @pytest.mark.asyncio
    async def test_indices_settings_family(self):
        transport = FakeTransport(
            make_response(200, {"movies": {"settings": {"index": {"number_of_shards": "1"}}}})
        )
        client = Client(transport=transport)

        resp = await client.indices.settings.get(SettingsGetReq(indices=["movies"]))

        assert resp.indices["movies"].settings["index"]["number_of_shards"] == "1"
