"""Filtering of tasks by status, attributes, dates and text."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from lazytask.models import Priority, Task, TaskStatus


@dataclass
class TaskFilter:
    """A conjunction of optional criteria; by default, pending tasks only."""

    status: TaskStatus | None = TaskStatus.PENDING
    project: str | None = None
    priority: Priority | None = None
    due_before: datetime | None = None
    due_after: datetime | None = None
    tags: list[str] = field(default_factory=list)
    description_contains: str | None = None
    is_active: bool | None = None
    is_overdue: bool | None = None
    is_blocked: bool | None = None

    def matches(self, task: Task, now: datetime | None = None) -> bool:
        """Whether the task satisfies every set criterion."""
        if self.status is not None and task.status is not self.status:
            return False

        if self.project is not None:
            if task.project is None or self.project not in task.project:
                return False

        if self.priority is not None and task.priority is not self.priority:
            return False

        if self.due_before is not None:
            if task.due is None or task.due >= self.due_before:
                return False

        if self.due_after is not None:
            if task.due is None or task.due <= self.due_after:
                return False

        if any(tag not in task.tags for tag in self.tags):
            return False

        if self.description_contains is not None:
            needle = self.description_contains.lower()
            found = (
                needle in task.description.lower()
                or (task.project is not None and needle in task.project.lower())
                or any(needle in tag.lower() for tag in task.tags)
            )
            if not found:
                return False

        if self.is_active is not None and task.is_active() != self.is_active:
            return False

        if self.is_overdue is not None and task.is_overdue(now) != self.is_overdue:
            return False

        if self.is_blocked is not None and task.is_blocked() != self.is_blocked:
            return False

        return True

    def apply(self, tasks: Iterable[Task], now: datetime | None = None) -> list[Task]:
        """The matching tasks, in their original order."""
        return [task for task in tasks if self.matches(task, now)]