"""Project store and its snapshot persistence."""

from diy_tracker.store.ids import SequentialIds, utc_now, uuid_id
from diy_tracker.store.persistence import (
    InMemorySnapshotStore,
    JsonFileSnapshotStore,
    RedisSnapshotStore,
    SnapshotStore,
    build_snapshot_store,
)
from diy_tracker.store.project_store import ProjectStore

__all__ = [
    "InMemorySnapshotStore",
    "JsonFileSnapshotStore",
    "ProjectStore",
    "RedisSnapshotStore",
    "SequentialIds",
    "SnapshotStore",
    "build_snapshot_store",
    "utc_now",
    "uuid_id",
]
