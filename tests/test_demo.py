import json
import subprocess
from datetime import datetime, timezone
from unittest import mock

from lazytask.demo import format_task_line, main
from lazytask.models import Priority, Task


def _fake_runner(export_tasks, fail=False):
    def run(argv, **kwargs):
        if "_get" in argv:
            return subprocess.CompletedProcess(argv, 0, b"/nonexistent/lazytask-data", b"")
        if fail:
            return subprocess.CompletedProcess(argv, 1, b"", b"boom")
        return subprocess.CompletedProcess(argv, 0, json.dumps(export_tasks).encode(), b"")

    return run


def test_format_full_line():
    task = Task(
        id=3,
        description="Buy milk",
        project="home",
        priority=Priority.HIGH,
        due=datetime(2025, 10, 7, 19, 29, 37, tzinfo=timezone.utc),
    )
    assert format_task_line(task) == "    3 [H] home         due:2025-10-07 - Buy milk"


def test_format_without_optional_fields():
    task = Task(description="Plain")
    line = format_task_line(task)
    assert line.startswith("      [ ] (no project) ")
    assert line.endswith(" - Plain")


def test_format_pads_columns_to_fixed_width():
    short = format_task_line(Task(id=1, description="x", project="a"))
    long = format_task_line(Task(id=1, description="x", project="abcdefghijkl"))
    assert len(short) == len(long)


def test_main_lists_pending_tasks(capsys):
    exported = [
        {
            "id": 7,
            "uuid": "00000000-0000-0000-0000-000000000007",
            "status": "pending",
            "description": "Write report",
            "project": "work",
            "priority": "M",
        }
    ]
    with mock.patch("subprocess.run", side_effect=_fake_runner(exported)) as run:
        code = main([])
    out = capsys.readouterr().out
    assert code == 0
    assert "Write report" in out
    assert "[M] work" in out
    assert "No pending tasks found." not in out
    export_call = run.call_args_list[-1].args[0]
    assert export_call[-2:] == ["+PENDING", "export"]


def test_main_with_no_tasks(capsys):
    with mock.patch("subprocess.run", side_effect=_fake_runner([])):
        code = main([])
    out = capsys.readouterr().out
    assert code == 0
    assert "   No pending tasks found." in out
    assert "LazyTask Features Implemented:" in out


def test_main_reports_command_failure(capsys):
    with mock.patch("subprocess.run", side_effect=_fake_runner([], fail=True)):
        code = main([])
    captured = capsys.readouterr()
    assert code == 1
    assert "Task command failed: boom" in captured.err
    assert "Features Implemented" not in captured.out