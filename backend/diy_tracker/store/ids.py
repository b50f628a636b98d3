"""Id generation and clock seams for the project store."""

import itertools
import uuid
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol

Clock = Callable[[], datetime]


class IdGenerator(Protocol):
    """Produces a new opaque identifier on each call."""

    def __call__(self) -> str: ...


def uuid_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(UTC)


class SequentialIds:
    """Deterministic ids for tests: ``step-1``, ``step-2``, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self._prefix = prefix
        self._counter = itertools.count(1)

    def __call__(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"
