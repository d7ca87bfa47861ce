"""A short console overview of pending tasks and available features."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from lazytask.cli_interface import TaskCommandError
from lazytask.models import Task
from lazytask.taskwarrior import TaskwarriorIntegration

_FEATURES = [
    "  ✅ Task Loading - Display real Taskwarrior tasks",
    "  ✅ Task Navigation - Arrow key navigation with selection",
    "  ✅ Task Creation - Modal form for adding new tasks",
    "  ✅ Task Completion - Mark tasks as done with 'd' key",
    "  ✅ Task Deletion - Delete tasks with confirmation",
    "  ✅ Filtering Support - Load tasks with filters",
    "  ✅ Theme System - Beautiful Catppuccin color scheme",
    "  ✅ Configuration - TOML-based customizable settings",
    "  ✅ Help System - Context-sensitive help (F1)",
    "  ✅ Auto-refresh - UI updates after operations",
]

_SHORTCUTS = [
    "  q         - Quit application",
    "  F1        - Show help",
    "  F5        - Refresh tasks",
    "  ↑/↓       - Navigate tasks",
    "  a         - Add new task",
    "  d         - Mark task done",
    "  Delete    - Delete task",
    "  Esc       - Go back/cancel",
    "  Enter     - Select/confirm",
]

_NEXT_PHASE = [
    "  🔄 Interactive filter engine with real-time preview",
    "  🔄 Split-panel interface (list + detail views)",
    "  🔄 Reports dashboard with calendar integration",
    "  🔄 Advanced keybinding customization",
]


def format_task_line(task: Task) -> str:
    """One line of the pending-task listing."""
    task_id = f"{task.id:>2}" if task.id is not None else "  "
    priority = f"[{task.priority.as_char()}]" if task.priority is not None else "[ ]"
    project = task.project if task.project is not None else "(no project)"
    due = f"due:{task.due.strftime('%Y-%m-%d')}" if task.due is not None else ""
    return f"   {task_id} {priority} {project:<12} {due:<12} - {task.description}"


def _report(tasks: list[Task]) -> None:
    print("📋 Current Tasks:")
    if not tasks:
        print("   No pending tasks found.")
    for task in tasks:
        print(format_task_line(task))
    print()
    print("🚀 LazyTask Features Implemented:")
    print("\n".join(_FEATURES))
    print()
    print("⌨️  Current Keyboard Shortcuts:")
    print("\n".join(_SHORTCUTS))
    print()
    print("🧪 To test the TUI interface:")
    print("   lazytask")
    print()
    print("📚 Next Phase Ready:")
    print("\n".join(_NEXT_PHASE))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the pending tasks and a feature overview."""
    parser = argparse.ArgumentParser(
        prog="lazytask-demo",
        description="Show pending Taskwarrior tasks and LazyTask features.",
    )
    parser.parse_args(argv)

    print("🎉 LazyTask v0.1.0 - Demo")
    print("========================")
    print()
    try:
        taskwarrior = TaskwarriorIntegration(None, None)
        tasks = taskwarrior.list_tasks("+PENDING")
    except (TaskCommandError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    _report(tasks)
    return 0


if __name__ == "__main__":
    sys.exit(main())