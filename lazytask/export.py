"""Writing tasks to and reading them from JSON or CSV files."""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path

from lazytask.models import Priority, Task, TaskStatus

CSV_HEADER = "ID,UUID,Status,Description,Project,Priority,Due,Tags"


class ExportFormat(Enum):
    JSON = "json"
    CSV = "csv"


def export_to_file(tasks: Iterable[Task], path: str | Path, format: ExportFormat) -> None:
    """Write the tasks to `path` in the given format."""
    if format is ExportFormat.JSON:
        _export_json(list(tasks), Path(path))
    else:
        _export_csv(tasks, Path(path))


def import_from_file(path: str | Path, format: ExportFormat) -> list[Task]:
    """Read tasks written by `export_to_file`."""
    if format is ExportFormat.JSON:
        return _import_json(Path(path))
    return _import_csv(Path(path))


def _export_json(tasks: list[Task], path: Path) -> None:
    text = json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False)
    path.write_text(text, encoding="utf-8")


def _import_json(path: Path) -> list[Task]:
    with path.open(encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, list):
        raise ValueError("expected a JSON array of tasks")
    return [Task.from_dict(item) for item in data]


def _csv_row(task: Task) -> str:
    fields = [
        "" if task.id is None else str(task.id),
        task.uuid,
        task.status.as_str(),
        task.description,
        task.project or "",
        task.priority.as_str() if task.priority is not None else "",
        task.due.strftime("%Y-%m-%d") if task.due is not None else "",
        ";".join(task.tags),
    ]
    return ",".join(fields)


def _export_csv(tasks: Iterable[Task], path: Path) -> None:
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(CSV_HEADER + "\n")
        for task in tasks:
            fh.write(_csv_row(task) + "\n")


def _parse_csv_row(line: str, line_no: int) -> Task:
    fields = line.split(",")
    if len(fields) < 8:
        raise ValueError(f"line {line_no}: expected 8 fields, found {len(fields)}")
    id_text, uuid, status = fields[0], fields[1], fields[2]
    project, priority, due, tags = fields[-4:]
    # Unquoted rows: any extra commas belong to the description.
    description = ",".join(fields[3:-4])
    try:
        task_id = int(id_text) if id_text else None
        due_date = (
            datetime.strptime(due, "%Y-%m-%d").replace(tzinfo=timezone.utc) if due else None
        )
    except ValueError as exc:
        raise ValueError(f"line {line_no}: {exc}") from None
    if not uuid:
        raise ValueError(f"line {line_no}: task UUID is required")
    return Task(
        id=task_id,
        uuid=uuid,
        status=TaskStatus.from_str(status),
        description=description,
        project=project or None,
        priority=Priority.from_str(priority) if priority else None,
        due=due_date,
        tags=[t for t in tags.split(";") if t],
    )


def _import_csv(path: Path) -> list[Task]:
    lines = path.read_text(encoding="utf-8").splitlines()
    if not lines or lines[0] != CSV_HEADER:
        raise ValueError("missing or unexpected CSV header")
    return [
        _parse_csv_row(line, number)
        for number, line in enumerate(lines[1:], start=2)
        if line.strip()
    ]