# lazytask

`lazytask` is a small toolkit for working with Taskwarrior tasks from
Python. It reads and changes tasks through the `task` command, models them
as plain Python objects, filters and caches them, writes them to JSON or
CSV files, and keeps its own settings in a TOML file.

## Installation

```
pip install .
```

The `task` executable must be on your `PATH` for anything that talks to
Taskwarrior.

## Quick look

Print your pending tasks, followed by an overview of features and keyboard
shortcuts:

```
lazytask-demo
```

If the `task` command fails, the error is printed and the command exits
with status 1.

## What is inside

- `lazytask.models`: `Task`, `TaskStatus`, `Priority`, `Annotation`,
  `Project` and `Tag`. `Task.from_json` reads one entry of `task export`
  output (entries without a `uuid` or `description` raise `ValueError`);
  `Task.to_dict` and `Task.from_dict` convert to and from a JSON-ready
  mapping. `parse_taskwarrior_datetime` reads Taskwarrior's compact UTC
  timestamps such as `20251007T192937Z` and returns `None` for anything
  else. `Task.is_overdue` takes an optional `now` for a fixed reference time.
- `lazytask.filters`: `TaskFilter` selects tasks by status, project
  (substring), priority, due dates, required tags, free text (searched in
  description, project and tags, ignoring case), and whether a task is
  active, overdue or blocked. By default it keeps pending tasks only.
  `matches` and `apply` accept an optional `now`.
- `lazytask.cache`: `TaskCache` keeps tasks by UUID for a fixed number of
  seconds; `cleanup_expired` drops old entries. A clock function can be
  passed in.
- `lazytask.export`: `export_to_file` and `import_from_file` write and read
  task lists as JSON or CSV, chosen with `ExportFormat`. CSV rows hold ID,
  UUID, status, description, project, priority, due date and `;`-separated
  tags, without quoting.
- `lazytask.cli_interface`: a basic `TaskwarriorCLI` (list and add),
  `parse_export`, `parse_created_task_id`, and `TaskCommandError`, raised
  when the `task` command cannot run or exits with a failure.
- `lazytask.taskwarrior`: `TaskwarriorCLI` and `TaskwarriorIntegration`
  list, fetch, add, modify, complete and delete tasks. Deletion passes
  `rc.confirmation=no`. In `modify_task`, an empty value for `tags`,
  `project`, `priority` or `due` clears that attribute; other keys with
  empty values are passed as bare words such as `+tag`.
  `TaskwarriorIntegration.database_path` is set when a
  `taskchampion.sqlite3` file exists in the data location. Both classes take
  an optional `runner` callable in place of the real process call.
- `lazytask.config`: `Config` loads settings from a TOML file, writing a
  default one first if none exists; invalid files raise `ValueError`.
  Without an explicit path the file lives in the user configuration
  directory, see `default_config_path()`.
- `lazytask.input` and `lazytask.navigation`: key-to-action mapping
  (`InputHandler`, `Action`, `Character`, `KeyEvent`) and a view stack
  (`NavigationHandler`, `View`) for building a terminal front end.

## Example

```python
from datetime import datetime, timezone

from lazytask.filters import TaskFilter
from lazytask.models import Task

task = Task.from_json({
    "uuid": "00000000-0000-4000-8000-000000000001",
    "description": "Write the quarterly report",
    "status": "pending",
    "project": "work.reports",
    "tags": ["writing"],
})

work = TaskFilter(project="work")
print(work.apply([task], now=datetime.now(timezone.utc)))
```

## What it does not do

The package has no full-screen interactive terminal interface: there is no
screen drawing, task form, filter bar or reports view. `lazytask.input` and
`lazytask.navigation` provide only the key mapping and view history such an
interface would use. Tasks are always read through the `task` command; the
TaskChampion database is located but never opened.

## Running the tests

```
pip install ".[test]"
pytest
```