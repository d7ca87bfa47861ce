"""Application configuration stored as TOML."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import platformdirs
import tomli_w


def _dict(data: Any, key: str) -> dict[str, Any]:
    if not isinstance(data, dict) or key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, dict):
        raise ValueError(f"field `{key}` must be a table")
    return value


def _str(data: dict[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string")
    return value


def _bool(data: dict[str, Any], key: str) -> bool:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, bool):
        raise ValueError(f"field `{key}` must be a boolean")
    return value


def _str_map(data: dict[str, Any], key: str) -> dict[str, str]:
    value = _dict(data, key)
    if not all(isinstance(v, str) for v in value.values()):
        raise ValueError(f"field `{key}` must map names to strings")
    return dict(value)


def _optional_path(data: dict[str, Any], key: str) -> Path | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a path string")
    return Path(value)


@dataclass
class ThemeConfig:
    name: str
    colors: dict[str, str] = field(default_factory=dict)


@dataclass
class KeyBindingsConfig:
    global_: dict[str, str] = field(default_factory=dict)
    task_list: dict[str, str] = field(default_factory=dict)
    task_detail: dict[str, str] = field(default_factory=dict)


@dataclass
class TaskwarriorConfig:
    taskrc_path: Path | None = None
    data_location: Path | None = None
    sync_enabled: bool = False


@dataclass
class UIConfig:
    default_view: str
    show_help_bar: bool
    task_list_columns: list[str]
    refresh_interval: int


@dataclass
class Config:
    theme: ThemeConfig
    keybindings: KeyBindingsConfig
    taskwarrior: TaskwarriorConfig
    ui: UIConfig

    @classmethod
    def default(cls) -> Config:
        return cls(
            theme=ThemeConfig(
                name="catppuccin-mocha",
                colors={
                    "background": "#1e1e2e",
                    "foreground": "#cdd6f4",
                    "primary": "#89b4fa",
                    "secondary": "#f38ba8",
                },
            ),
            keybindings=KeyBindingsConfig(
                global_={"quit": "q", "help": "F1", "refresh": "F5"},
                task_list={
                    "add_task": "a",
                    "edit_task": "e",
                    "done_task": "d",
                    "delete_task": "Delete",
                },
                task_detail={},
            ),
            taskwarrior=TaskwarriorConfig(),
            ui=UIConfig(
                default_view="task_list",
                show_help_bar=True,
                task_list_columns=["id", "project", "priority", "due", "description"],
                refresh_interval=1000,
            ),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build from parsed TOML; every non-optional field is required."""
        theme = _dict(data, "theme")
        keys = _dict(data, "keybindings")
        tw = _dict(data, "taskwarrior")
        ui = _dict(data, "ui")

        columns = ui.get("task_list_columns")
        if "task_list_columns" not in ui:
            raise ValueError("missing field `task_list_columns`")
        if not isinstance(columns, list) or not all(isinstance(c, str) for c in columns):
            raise ValueError("field `task_list_columns` must be a list of strings")
        if "refresh_interval" not in ui:
            raise ValueError("missing field `refresh_interval`")
        interval = ui["refresh_interval"]
        if not isinstance(interval, int) or isinstance(interval, bool) or interval < 0:
            raise ValueError("field `refresh_interval` must be a non-negative integer")

        return cls(
            theme=ThemeConfig(name=_str(theme, "name"), colors=_str_map(theme, "colors")),
            keybindings=KeyBindingsConfig(
                global_=_str_map(keys, "global"),
                task_list=_str_map(keys, "task_list"),
                task_detail=_str_map(keys, "task_detail"),
            ),
            taskwarrior=TaskwarriorConfig(
                taskrc_path=_optional_path(tw, "taskrc_path"),
                data_location=_optional_path(tw, "data_location"),
                sync_enabled=_bool(tw, "sync_enabled"),
            ),
            ui=UIConfig(
                default_view=_str(ui, "default_view"),
                show_help_bar=_bool(ui, "show_help_bar"),
                task_list_columns=list(columns),
                refresh_interval=interval,
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """A TOML-ready mapping; unset optional paths are left out."""
        taskwarrior: dict[str, Any] = {}
        if self.taskwarrior.taskrc_path is not None:
            taskwarrior["taskrc_path"] = str(self.taskwarrior.taskrc_path)
        if self.taskwarrior.data_location is not None:
            taskwarrior["data_location"] = str(self.taskwarrior.data_location)
        taskwarrior["sync_enabled"] = self.taskwarrior.sync_enabled
        return {
            "theme": {"name": self.theme.name, "colors": dict(self.theme.colors)},
            "keybindings": {
                "global": dict(self.keybindings.global_),
                "task_list": dict(self.keybindings.task_list),
                "task_detail": dict(self.keybindings.task_detail),
            },
            "taskwarrior": taskwarrior,
            "ui": {
                "default_view": self.ui.default_view,
                "show_help_bar": self.ui.show_help_bar,
                "task_list_columns": list(self.ui.task_list_columns),
                "refresh_interval": self.ui.refresh_interval,
            },
        }

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> Config:
        """Read the config file, creating it with defaults if it does not exist."""
        path = Path(config_path) if config_path is not None else default_config_path()
        if path.exists():
            text = path.read_text(encoding="utf-8")
            try:
                return cls.from_dict(tomllib.loads(text))
            except (tomllib.TOMLDecodeError, ValueError) as exc:
                raise ValueError(f"Failed to parse config file: {exc}") from exc
        config = cls.default()
        config.save(path)
        return config

    def save(self, path: str | Path) -> None:
        """Write the config as TOML, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(tomli_w.dumps(self.to_dict()), encoding="utf-8")


def default_config_path() -> Path:
    return Path(platformdirs.user_config_dir()) / "lazytask" / "config.toml"