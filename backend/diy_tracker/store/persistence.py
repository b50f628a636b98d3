"""Snapshot persistence port and its backends.

The project store talks to a ``SnapshotStore``: ``load()`` returns the last
saved JSON document (or None when nothing was ever saved) and ``save()``
replaces it. Backends raise PersistenceError on any I/O or decode failure;
deciding whether that is fatal is the caller's job.
"""

import copy
import json
import os
from pathlib import Path
from typing import Protocol, runtime_checkable

import redis
import structlog

from diy_tracker.core.config import Settings
from diy_tracker.core.exceptions import PersistenceError

logger = structlog.get_logger(__name__)

DEFAULT_STORE_KEY = "diy-project-store"


@runtime_checkable
class SnapshotStore(Protocol):
    """Key-value storage for a single snapshot document."""

    def load(self) -> dict | None:
        """Return the saved document, or None if nothing has been saved."""
        ...

    def save(self, snapshot: dict) -> None:
        """Replace the saved document."""
        ...


class InMemorySnapshotStore:
    """Holds the document in memory. Used for tests and throwaway sessions."""

    def __init__(self, document: dict | None = None) -> None:
        self.document = copy.deepcopy(document)
        self.save_count = 0

    def load(self) -> dict | None:
        return copy.deepcopy(self.document)

    def save(self, snapshot: dict) -> None:
        self.document = copy.deepcopy(snapshot)
        self.save_count += 1


class JsonFileSnapshotStore:
    """Stores the document as a JSON file.

    Writes go to a sibling temp file first and are moved into place, so a
    crash mid-write leaves the previous snapshot intact.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> dict | None:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise PersistenceError("file", str(exc)) from exc

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise PersistenceError("file", f"invalid JSON in {self.path}: {exc}") from exc

    def save(self, snapshot: dict) -> None:
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(snapshot, indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise PersistenceError("file", str(exc)) from exc


class RedisSnapshotStore:
    """Stores the document as a JSON string under a single Redis key."""

    def __init__(self, client: redis.Redis, key: str = DEFAULT_STORE_KEY) -> None:
        self._client = client
        self.key = key

    @classmethod
    def from_url(cls, url: str, key: str = DEFAULT_STORE_KEY) -> "RedisSnapshotStore":
        client = redis.Redis.from_url(url, encoding="utf-8", decode_responses=True)
        return cls(client, key)

    def load(self) -> dict | None:
        try:
            raw = self._client.get(self.key)
        except redis.RedisError as exc:
            raise PersistenceError("redis", str(exc)) from exc

        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise PersistenceError("redis", f"invalid JSON at key {self.key}: {exc}") from exc

    def save(self, snapshot: dict) -> None:
        try:
            self._client.set(self.key, json.dumps(snapshot))
        except redis.RedisError as exc:
            raise PersistenceError("redis", str(exc)) from exc


def build_snapshot_store(settings: Settings) -> SnapshotStore:
    """Create the backend selected by ``settings.store_backend``."""
    if settings.store_backend == "redis":
        logger.info("snapshot_backend_selected", backend="redis", key=settings.store_key)
        return RedisSnapshotStore.from_url(settings.redis_url, key=settings.store_key)
    if settings.store_backend == "memory":
        logger.info("snapshot_backend_selected", backend="memory")
        return InMemorySnapshotStore()
    logger.info("snapshot_backend_selected", backend="file", path=settings.store_path)
    return JsonFileSnapshotStore(settings.store_path)
