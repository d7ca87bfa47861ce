"""Task data model and parsing of Taskwarrior export data."""

from __future__ import annotations

import uuid as _uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class TaskStatus(Enum):
    """Lifecycle state of a task."""

    PENDING = "pending"
    COMPLETED = "completed"
    DELETED = "deleted"
    WAITING = "waiting"
    RECURRING = "recurring"

    @classmethod
    def from_str(cls, s: str) -> TaskStatus:
        """Parse a status name case-insensitively; unknown names mean pending."""
        try:
            return cls(s.lower())
        except ValueError:
            return cls.PENDING

    def as_str(self) -> str:
        return self.value


class Priority(Enum):
    """Task priority, valued by its Taskwarrior letter."""

    HIGH = "H"
    MEDIUM = "M"
    LOW = "L"

    @classmethod
    def from_str(cls, s: str) -> Priority | None:
        """Parse a priority letter case-insensitively, or return None."""
        try:
            return cls(s.upper())
        except ValueError:
            return None

    def as_str(self) -> str:
        return self.value

    def as_char(self) -> str:
        return self.value


def _variant_name(member: Enum) -> str:
    return member.name.capitalize()


def _variant_from_name(enum_cls: type[Enum], name: Any) -> Any:
    for member in enum_cls:
        if _variant_name(member) == name:
            return member
    raise ValueError(f"unknown {enum_cls.__name__} variant: {name!r}")


def parse_taskwarrior_datetime(date_str: str) -> datetime | None:
    """Parse Taskwarrior's compact UTC form, e.g. 20251007T192937Z."""
    if len(date_str) != 16 or not date_str.endswith("Z"):
        return None
    parts = (
        date_str[0:4],
        date_str[4:6],
        date_str[6:8],
        date_str[9:11],
        date_str[11:13],
        date_str[13:15],
    )
    if not all(p.isascii() and p.isdigit() for p in parts):
        return None
    try:
        return datetime(*(int(p) for p in parts), tzinfo=timezone.utc)
    except ValueError:
        return None


def _format_datetime(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _parse_datetime(value: Any) -> datetime:
    if not isinstance(value, str):
        raise ValueError(f"expected a datetime string, got {value!r}")
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        raise ValueError(f"datetime without offset: {value!r}")
    return dt.astimezone(timezone.utc)


def _optional_datetime(value: Any) -> datetime | None:
    return None if value is None else _parse_datetime(value)


def _required(data: dict[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _string_at(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) else None


def _date_at(data: dict[str, Any], key: str) -> datetime | None:
    text = _string_at(data, key)
    return parse_taskwarrior_datetime(text) if text is not None else None


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Annotation:
    """A timestamped note attached to a task."""

    entry: datetime
    description: str

    @classmethod
    def from_json(cls, data: Any) -> Annotation:
        """Build from a Taskwarrior export annotation object."""
        source = data if isinstance(data, dict) else {}
        entry = _date_at(source, "entry")
        if entry is None:
            raise ValueError("Annotation entry time is required")
        description = _string_at(source, "description")
        if description is None:
            raise ValueError("Annotation description is required")
        return cls(entry=entry, description=description)

    def to_dict(self) -> dict[str, Any]:
        return {"entry": _format_datetime(self.entry), "description": self.description}


@dataclass
class Project:
    name: str
    task_count: int = 0
    completed_count: int = 0
    pending_count: int = 0


@dataclass
class Tag:
    name: str
    task_count: int = 0


@dataclass(kw_only=True)
class Task:
    """A Taskwarrior task."""

    id: int | None = None
    uuid: str = field(default_factory=lambda: str(_uuid.uuid4()))
    status: TaskStatus = TaskStatus.PENDING
    description: str
    project: str | None = None
    priority: Priority | None = None
    due: datetime | None = None
    entry: datetime = field(default_factory=_utc_now)
    modified: datetime | None = None
    end: datetime | None = None
    start: datetime | None = None
    wait: datetime | None = None
    scheduled: datetime | None = None
    until: datetime | None = None
    depends: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    annotations: list[Annotation] = field(default_factory=list)
    urgency: float = 0.0
    udas: dict[str, str] = field(default_factory=dict)

    @classmethod
    def new(cls, description: str) -> Task:
        """A fresh pending task with a random UUID, entered now."""
        return cls(description=description)

    @classmethod
    def from_json(cls, data: Any) -> Task:
        """Build from one object of `task export` output."""
        source = data if isinstance(data, dict) else {}

        raw_id = source.get("id")
        task_id = (
            raw_id % 2**32
            if isinstance(raw_id, int) and not isinstance(raw_id, bool) and raw_id >= 0
            else None
        )

        uuid = _string_at(source, "uuid")
        if uuid is None:
            raise ValueError("Task UUID is required")

        status_text = _string_at(source, "status")
        status = TaskStatus.from_str(status_text) if status_text is not None else TaskStatus.PENDING

        description = _string_at(source, "description")
        if description is None:
            raise ValueError("Task description is required")

        priority_text = _string_at(source, "priority")
        priority = Priority.from_str(priority_text) if priority_text is not None else None

        raw_tags = source.get("tags")
        tags = [t for t in raw_tags if isinstance(t, str)] if isinstance(raw_tags, list) else []

        annotations = []
        raw_annotations = source.get("annotations")
        if isinstance(raw_annotations, list):
            for item in raw_annotations:
                try:
                    annotations.append(Annotation.from_json(item))
                except ValueError:
                    continue

        raw_urgency = source.get("urgency")
        urgency = (
            float(raw_urgency)
            if isinstance(raw_urgency, (int, float)) and not isinstance(raw_urgency, bool)
            else 0.0
        )

        return cls(
            id=task_id,
            uuid=uuid,
            status=status,
            description=description,
            project=_string_at(source, "project"),
            priority=priority,
            due=_date_at(source, "due"),
            entry=_date_at(source, "entry") or _utc_now(),
            modified=_date_at(source, "modified"),
            end=_date_at(source, "end"),
            start=_date_at(source, "start"),
            wait=_date_at(source, "wait"),
            scheduled=_date_at(source, "scheduled"),
            until=_date_at(source, "until"),
            tags=tags,
            annotations=annotations,
            urgency=urgency,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        """Rebuild a task from the form produced by `to_dict`."""
        if not isinstance(data, dict):
            raise ValueError("task must be an object")
        task_id = data.get("id")
        if task_id is not None and (not isinstance(task_id, int) or isinstance(task_id, bool)):
            raise ValueError(f"invalid task id: {task_id!r}")
        priority = data.get("priority")
        annotations = [
            Annotation(
                entry=_parse_datetime(_required(item, "entry")),
                description=str(_required(item, "description")),
            )
            for item in _required(data, "annotations")
        ]
        return cls(
            id=task_id,
            uuid=str(_required(data, "uuid")),
            status=_variant_from_name(TaskStatus, _required(data, "status")),
            description=str(_required(data, "description")),
            project=data.get("project"),
            priority=None if priority is None else _variant_from_name(Priority, priority),
            due=_optional_datetime(data.get("due")),
            entry=_parse_datetime(_required(data, "entry")),
            modified=_optional_datetime(data.get("modified")),
            end=_optional_datetime(data.get("end")),
            start=_optional_datetime(data.get("start")),
            wait=_optional_datetime(data.get("wait")),
            scheduled=_optional_datetime(data.get("scheduled")),
            until=_optional_datetime(data.get("until")),
            depends=list(_required(data, "depends")),
            tags=list(_required(data, "tags")),
            annotations=annotations,
            urgency=float(_required(data, "urgency")),
            udas=dict(_required(data, "udas")),
        )

    def to_dict(self) -> dict[str, Any]:
        """A JSON-ready mapping of every field, in declaration order."""

        def opt(dt: datetime | None) -> str | None:
            return None if dt is None else _format_datetime(dt)

        return {
            "id": self.id,
            "uuid": self.uuid,
            "status": _variant_name(self.status),
            "description": self.description,
            "project": self.project,
            "priority": None if self.priority is None else _variant_name(self.priority),
            "due": opt(self.due),
            "entry": _format_datetime(self.entry),
            "modified": opt(self.modified),
            "end": opt(self.end),
            "start": opt(self.start),
            "wait": opt(self.wait),
            "scheduled": opt(self.scheduled),
            "until": opt(self.until),
            "depends": list(self.depends),
            "tags": list(self.tags),
            "annotations": [a.to_dict() for a in self.annotations],
            "urgency": self.urgency,
            "udas": dict(self.udas),
        }

    def is_active(self) -> bool:
        return self.start is not None and self.status is TaskStatus.PENDING

    def is_overdue(self, now: datetime | None = None) -> bool:
        if self.due is None:
            return False
        current = now if now is not None else _utc_now()
        return self.due < current and self.status is TaskStatus.PENDING

    def is_blocked(self) -> bool:
        return bool(self.depends)