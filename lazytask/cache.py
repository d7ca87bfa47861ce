"""A time-limited in-memory cache of tasks keyed by UUID."""

from __future__ import annotations

import time
from collections.abc import Callable

from lazytask.models import Task


class TaskCache:
    """Holds tasks for at most `max_age_seconds` after insertion."""

    def __init__(
        self,
        max_age_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_age = float(max_age_seconds)
        self._clock = clock
        self._tasks: dict[str, tuple[Task, float]] = {}

    def _fresh(self, cached_at: float) -> bool:
        return self._clock() - cached_at < self._max_age

    def get(self, uuid: str) -> Task | None:
        """The cached task, or None if absent or expired."""
        entry = self._tasks.get(uuid)
        if entry is not None and self._fresh(entry[1]):
            return entry[0]
        return None

    def insert(self, task: Task) -> None:
        self._tasks[task.uuid] = (task, self._clock())

    def remove(self, uuid: str) -> None:
        self._tasks.pop(uuid, None)

    def clear(self) -> None:
        self._tasks.clear()

    def cleanup_expired(self) -> None:
        """Drop every entry older than the maximum age."""
        self._tasks = {k: v for k, v in self._tasks.items() if self._fresh(v[1])}

    def __len__(self) -> int:
        return len(self._tasks)