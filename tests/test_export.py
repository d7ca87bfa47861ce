import json
from datetime import datetime, timezone

import pytest

from lazytask.export import ExportFormat, export_to_file, import_from_file
from lazytask.models import Annotation, Priority, Task, TaskStatus

REF = datetime(2025, 10, 7, 19, 29, 37, tzinfo=timezone.utc)


@pytest.fixture
def tasks():
    return [
        Task(
            id=7,
            uuid="u-1",
            description="Write report",
            project="home",
            priority=Priority.HIGH,
            due=REF,
            entry=REF,
            tags=["a", "b"],
            annotations=[Annotation(entry=REF, description="note")],
            urgency=1.5,
        ),
        Task(uuid="u-2", description="Other", status=TaskStatus.COMPLETED, entry=REF),
    ]


def test_json_round_trip(tmp_path, tasks):
    path = tmp_path / "tasks.json"
    export_to_file(tasks, path, ExportFormat.JSON)
    assert import_from_file(path, ExportFormat.JSON) == tasks
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert [item["uuid"] for item in raw] == ["u-1", "u-2"]
    assert raw[1]["status"] == "Completed"


def test_json_import_rejects_non_array(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"uuid": "x"}', encoding="utf-8")
    with pytest.raises(ValueError):
        import_from_file(path, ExportFormat.JSON)


def test_csv_layout(tmp_path, tasks):
    path = tmp_path / "tasks.csv"
    export_to_file(tasks, path, ExportFormat.CSV)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "ID,UUID,Status,Description,Project,Priority,Due,Tags"
    assert lines[1] == "7,u-1,pending,Write report,home,H,2025-10-07,a;b"
    assert len(lines) == 1 + len(tasks)


def test_csv_round_trip_fields(tmp_path, tasks):
    path = tmp_path / "tasks.csv"
    export_to_file(tasks, path, ExportFormat.CSV)
    loaded = import_from_file(path, ExportFormat.CSV)
    for original, back in zip(tasks, loaded, strict=True):
        assert back.id == original.id
        assert back.uuid == original.uuid
        assert back.status is original.status
        assert back.description == original.description
        assert back.project == original.project
        assert back.priority is original.priority
        assert back.tags == original.tags
    assert loaded[0].due.date() == tasks[0].due.date()
    assert loaded[1].due is None


def test_csv_description_with_commas(tmp_path):
    task = Task(uuid="u", description="one, two, three")
    path = tmp_path / "t.csv"
    export_to_file([task], path, ExportFormat.CSV)
    assert import_from_file(path, ExportFormat.CSV)[0].description == task.description


def test_csv_import_rejects_short_row(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("ID,UUID,Status,Description,Project,Priority,Due,Tags\n1,u,pending\n", encoding="utf-8")
    with pytest.raises(ValueError):
        import_from_file(path, ExportFormat.CSV)


def test_csv_import_rejects_missing_header(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("1,u,pending,d,,,,\n", encoding="utf-8")
    with pytest.raises(ValueError):
        import_from_file(path, ExportFormat.CSV)