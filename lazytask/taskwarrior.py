"""High-level access to Taskwarrior through its command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from lazytask import cli_interface
from lazytask.cli_interface import Runner, TaskCommandError, parse_created_task_id
from lazytask.models import Task

DATABASE_FILE = "taskchampion.sqlite3"

_CLEARABLE = frozenset({"tags", "project", "priority", "due"})


class TaskwarriorCLI(cli_interface.TaskwarriorCLI):
    """The `task` command with the full set of task operations."""

    def _command(self, args: Sequence[str]) -> list[str]:
        argv = ["task"]
        if self.taskrc_path is not None:
            argv.append(f"rc:{self.taskrc_path}")
        return argv + list(args)

    def _failure_message(self, args: Sequence[str], stdout: str, stderr: str) -> str:
        stdout, stderr = stdout.strip(), stderr.strip()
        if stderr:
            return f"Task command failed: {stderr}"
        if stdout:
            return f"Task command failed. Output: {stdout}"
        return f"Task command failed with no output. Command: task {' '.join(args)}"

    def execute_command(self, args: Sequence[str]) -> str:
        """Run `task` with the arguments and return its trimmed standard output."""
        return super().execute_command(args)

    def list_tasks(self, filter: str | None = None) -> list[Task]:
        return super().list_tasks(filter)

    def get_task(self, id: int) -> Task | None:
        """The task with this working-set ID, if any."""
        return next(iter(self.list_tasks(str(id))), None)

    def add_task(self, description: str, attributes: Iterable[tuple[str, str]] = ()) -> int:
        """Add a task; attributes with empty values are passed as bare words (e.g. +tag)."""
        args = ["add", description]
        args += [key if not value else f"{key}:{value}" for key, value in attributes]
        return parse_created_task_id(self.execute_command(args))

    def modify_task(self, id: int, attributes: Iterable[tuple[str, str]]) -> None:
        """Modify a task; empty values clear tags, project, priority and due."""
        args = [str(id), "modify"]
        for key, value in attributes:
            if value:
                args.append(f"{key}:{value}")
            elif key in _CLEARABLE:
                args.append(f"{key}:")
            else:
                args.append(key)
        self.execute_command(args)

    def done_task(self, id: int) -> None:
        self.execute_command([str(id), "done"])

    def delete_task(self, id: int) -> None:
        self.execute_command([str(id), "delete", "rc.confirmation=no"])


class TaskwarriorIntegration:
    """Task operations, plus the location of the TaskChampion database if present."""

    def __init__(
        self,
        taskrc_path: str | Path | None = None,
        data_location: str | Path | None = None,
        runner: Runner | None = None,
    ) -> None:
        self.cli = TaskwarriorCLI(taskrc_path, runner)
        if data_location is None:
            try:
                data_location = self.cli.execute_command(["_get", "rc.data.location"])
            except TaskCommandError:
                data_location = None
        self.database_path: Path | None = None
        if data_location is not None:
            candidate = Path(data_location) / DATABASE_FILE
            if candidate.exists():
                self.database_path = candidate

    def list_tasks(self, filter: str | None = None) -> list[Task]:
        return self.cli.list_tasks(filter)

    def get_task(self, id: int) -> Task | None:
        return self.cli.get_task(id)

    def add_task(self, description: str, attributes: Iterable[tuple[str, str]] = ()) -> int:
        return self.cli.add_task(description, attributes)

    def modify_task(self, id: int, attributes: Iterable[tuple[str, str]]) -> None:
        self.cli.modify_task(id, attributes)

    def done_task(self, id: int) -> None:
        self.cli.done_task(id)

    def delete_task(self, id: int) -> None:
        self.cli.delete_task(id)