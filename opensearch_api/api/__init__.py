"""Endpoint descriptors, typed responses and sub-clients, one module per family."""

from .cluster import (
    ClusterGetSettingsReq,
    ClusterGetSettingsResp,
    ClusterHealthReq,
    ClusterHealthResp,
    ClusterPutSettingsReq,
    ClusterPutSettingsResp,
)
from .common import AcknowledgedResp, ResponseShards, ShardFailure
from .document import (
    DocumentCreateReq,
    DocumentCreateResp,
    DocumentDeleteReq,
    DocumentDeleteResp,
    DocumentExistsReq,
    DocumentGetReq,
    DocumentGetResp,
    IndexReq,
    IndexResp,
    MGetReq,
    MGetResp,
    UpdateReq,
    UpdateResp,
)
from .index_template import (
    IndexTemplateCreateReq,
    IndexTemplateCreateResp,
    IndexTemplateDeleteReq,
    IndexTemplateDeleteResp,
    IndexTemplateExistsReq,
    IndexTemplateGetReq,
    IndexTemplateGetResp,
)
from .indices import (
    AliasDeleteReq,
    AliasDeleteResp,
    AliasExistsReq,
    AliasGetReq,
    AliasGetResp,
    AliasPutReq,
    AliasPutResp,
    IndicesCreateReq,
    IndicesCreateResp,
    IndicesDeleteReq,
    IndicesDeleteResp,
    IndicesExistsReq,
    IndicesGetReq,
    IndicesGetResp,
    IndicesRefreshReq,
    IndicesRefreshResp,
    MappingGetReq,
    MappingGetResp,
    MappingPutReq,
    MappingPutResp,
    SettingsGetReq,
    SettingsGetResp,
    SettingsPutReq,
    SettingsPutResp,
)
from .info import InfoReq, InfoResp, PingReq
from .migration import ColdToWarmReq, MigrationResp, WarmToColdReq
from .point_in_time import (
    PointInTimeCreateReq,
    PointInTimeCreateResp,
    PointInTimeDeleteReq,
    PointInTimeDeleteResp,
    PointInTimeGetReq,
    PointInTimeGetResp,
)
from .search import (
    ScrollDeleteReq,
    ScrollDeleteResp,
    ScrollGetReq,
    ScrollGetResp,
    SearchHit,
    SearchReq,
    SearchResp,
)
from .snapshot import (
    SnapshotCloneReq,
    SnapshotCloneResp,
    SnapshotCreateReq,
    SnapshotCreateResp,
    SnapshotDeleteReq,
    SnapshotDeleteResp,
    SnapshotGetReq,
    SnapshotGetResp,
    SnapshotRepositoryCreateReq,
    SnapshotRepositoryCreateResp,
    SnapshotRepositoryDeleteReq,
    SnapshotRepositoryDeleteResp,
    SnapshotRepositoryGetReq,
    SnapshotRepositoryGetResp,
    SnapshotRestoreReq,
    SnapshotRestoreResp,
    SnapshotStatusReq,
    SnapshotStatusResp,
)
from .tasks import (
    TasksCancelReq,
    TasksCancelResp,
    TasksGetReq,
    TasksGetResp,
    TasksListReq,
    TasksListResp,
)

__all__ = [
    # Shared shapes
    "AcknowledgedResp",
    "ResponseShards",
    "ShardFailure",
    # Root
    "InfoReq",
    "InfoResp",
    "PingReq",
    # Documents
    "IndexReq",
    "IndexResp",
    "DocumentCreateReq",
    "DocumentCreateResp",
    "DocumentGetReq",
    "DocumentGetResp",
    "DocumentExistsReq",
    "DocumentDeleteReq",
    "DocumentDeleteResp",
    "UpdateReq",
    "UpdateResp",
    "MGetReq",
    "MGetResp",
    # Search
    "SearchReq",
    "SearchResp",
    "SearchHit",
    "ScrollGetReq",
    "ScrollGetResp",
    "ScrollDeleteReq",
    "ScrollDeleteResp",
    # Indices
    "IndicesCreateReq",
    "IndicesCreateResp",
    "IndicesGetReq",
    "IndicesGetResp",
    "IndicesDeleteReq",
    "IndicesDeleteResp",
    "IndicesExistsReq",
    "IndicesRefreshReq",
    "IndicesRefreshResp",
    "AliasPutReq",
    "AliasPutResp",
    "AliasGetReq",
    "AliasGetResp",
    "AliasDeleteReq",
    "AliasDeleteResp",
    "AliasExistsReq",
    "SettingsGetReq",
    "SettingsGetResp",
    "SettingsPutReq",
    "SettingsPutResp",
    "MappingGetReq",
    "MappingGetResp",
    "MappingPutReq",
    "MappingPutResp",
    # Cluster
    "ClusterHealthReq",
    "ClusterHealthResp",
    "ClusterGetSettingsReq",
    "ClusterGetSettingsResp",
    "ClusterPutSettingsReq",
    "ClusterPutSettingsResp",
    # Tasks
    "TasksListReq",
    "TasksListResp",
    "TasksGetReq",
    "TasksGetResp",
    "TasksCancelReq",
    "TasksCancelResp",
    # Snapshots
    "SnapshotCreateReq",
    "SnapshotCreateResp",
    "SnapshotGetReq",
    "SnapshotGetResp",
    "SnapshotDeleteReq",
    "SnapshotDeleteResp",
    "SnapshotRestoreReq",
    "SnapshotRestoreResp",
    "SnapshotCloneReq",
    "SnapshotCloneResp",
    "SnapshotStatusReq",
    "SnapshotStatusResp",
    "SnapshotRepositoryCreateReq",
    "SnapshotRepositoryCreateResp",
    "SnapshotRepositoryGetReq",
    "SnapshotRepositoryGetResp",
    "SnapshotRepositoryDeleteReq",
    "SnapshotRepositoryDeleteResp",
    # Point in time
    "PointInTimeCreateReq",
    "PointInTimeCreateResp",
    "PointInTimeGetReq",
    "PointInTimeGetResp",
    "PointInTimeDeleteReq",
    "PointInTimeDeleteResp",
    # Index templates
    "IndexTemplateCreateReq",
    "IndexTemplateCreateResp",
    "IndexTemplateGetReq",
    "IndexTemplateGetResp",
    "IndexTemplateDeleteReq",
    "IndexTemplateDeleteResp",
    "IndexTemplateExistsReq",
    # Tier migration
    "ColdToWarmReq",
    "WarmToColdReq",
    "MigrationResp",
]
