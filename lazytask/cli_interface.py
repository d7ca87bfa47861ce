"""Running the `task` command and reading its export output."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Any

from lazytask.models import Task

Runner = Callable[[Sequence[str]], Any]

_MAX_TASK_ID = 2**32 - 1


class TaskCommandError(RuntimeError):
    """The `task` command could not be run or reported failure."""


def run_task_process(argv: Sequence[str]) -> subprocess.CompletedProcess:
    """Run a command, capturing its output without raising on failure."""
    return subprocess.run(list(argv), capture_output=True, check=False)


def _decode(data: bytes | str | None) -> str:
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    return data.decode("utf-8", errors="replace")


def _all_digits(text: str) -> bool:
    return all(c in "0123456789" for c in text)


def parse_created_task_id(output: str) -> int:
    """Extract the new task's ID from output such as "Created task 42."."""
    words = output.split()
    candidate = next(
        (w[:-1] for w in words if w.endswith(".") and _all_digits(w[:-1])),
        None,
    )
    if candidate is None:
        candidate = next((w for w in words if _all_digits(w)), None)
    if candidate is None:
        raise ValueError(f"Could not parse task ID from output: {output}")
    if not candidate or int(candidate) > _MAX_TASK_ID:
        raise ValueError("Failed to parse task ID")
    return int(candidate)


def parse_export(output: str) -> list[Task]:
    """Tasks from `task export` JSON; entries that are not valid tasks are skipped."""
    try:
        data = json.loads(output)
    except json.JSONDecodeError as exc:
        raise ValueError("Failed to parse task export JSON") from exc
    if not isinstance(data, list):
        raise ValueError("Failed to parse task export JSON")
    tasks = []
    for item in data:
        try:
            tasks.append(Task.from_json(item))
        except ValueError:
            continue
    return tasks


class TaskwarriorCLI:
    """Executes `task` commands, optionally against a specific taskrc."""

    def __init__(
        self,
        taskrc_path: str | Path | None = None,
        runner: Runner | None = None,
    ) -> None:
        self.taskrc_path = Path(taskrc_path) if taskrc_path is not None else None
        self._runner = runner if runner is not None else run_task_process

    def _command(self, args: Sequence[str]) -> list[str]:
        argv = ["task"]
        if self.taskrc_path is not None:
            argv += ["rc:", str(self.taskrc_path)]
        return argv + list(args)

    def _failure_message(self, args: Sequence[str], stdout: str, stderr: str) -> str:
        return f"Task command failed: {stderr}"

    def execute_command(self, args: Sequence[str]) -> str:
        """Run `task` with the arguments and return its trimmed standard output."""
        args = list(args)
        try:
            result = self._runner(self._command(args))
        except OSError as exc:
            raise TaskCommandError(f"Failed to execute task command: {args!r}") from exc
        stdout = _decode(result.stdout)
        stderr = _decode(result.stderr)
        if result.returncode != 0:
            raise TaskCommandError(self._failure_message(args, stdout, stderr))
        return stdout.strip()

    def list_tasks(self, filter: str | None = None) -> list[Task]:
        """Export the tasks matching the filter."""
        args = ["export"] if filter is None else [filter, "export"]
        return parse_export(self.execute_command(args))

    def add_task(self, description: str, attributes: Iterable[tuple[str, str]] = ()) -> int:
        """Add a task with `key:value` attributes; return its new ID."""
        args = ["add", description, *(f"{key}:{value}" for key, value in attributes)]
        return parse_created_task_id(self.execute_command(args))