import tomllib
from pathlib import Path

import pytest

from lazytask.config import Config, default_config_path


def test_default_values():
    config = Config.default()
    assert config.theme.name == "catppuccin-mocha"
    assert config.theme.colors["background"] == "#1e1e2e"
    assert config.keybindings.global_["quit"] == "q"
    assert config.keybindings.task_list["delete_task"] == "Delete"
    assert config.keybindings.task_detail == {}
    assert config.taskwarrior.taskrc_path is None
    assert config.taskwarrior.sync_enabled is False
    assert config.ui.task_list_columns == ["id", "project", "priority", "due", "description"]
    assert config.ui.refresh_interval == 1000
    assert config.ui.default_view == "task_list"


def test_to_dict_omits_unset_paths():
    data = Config.default().to_dict()
    assert "taskrc_path" not in data["taskwarrior"]
    assert "data_location" not in data["taskwarrior"]
    assert data["keybindings"]["global"]["help"] == "F1"


def test_dict_round_trip_with_paths():
    config = Config.default()
    config.taskwarrior.taskrc_path = Path("/home/user/.taskrc")
    config.taskwarrior.data_location = Path("/home/user/.task")
    assert Config.from_dict(config.to_dict()) == config


def test_load_creates_default_file(tmp_path):
    path = tmp_path / "nested" / "config.toml"
    config = Config.load(path)
    assert config == Config.default()
    assert path.exists()
    assert tomllib.loads(path.read_text())["ui"]["show_help_bar"] is True


def test_save_then_load(tmp_path):
    path = tmp_path / "config.toml"
    config = Config.default()
    config.ui.show_help_bar = False
    config.theme.colors["accent"] = "#ffffff"
    config.save(path)
    assert Config.load(path) == config


def test_load_invalid_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("this is = = not toml")
    with pytest.raises(ValueError, match="Failed to parse config file"):
        Config.load(path)


def test_load_missing_field(tmp_path):
    path = tmp_path / "config.toml"
    data = Config.default().to_dict()
    del data["ui"]["refresh_interval"]
    Config.default().save(path)
    text = path.read_text().replace("refresh_interval = 1000\n", "")
    path.write_text(text)
    with pytest.raises(ValueError, match="refresh_interval"):
        Config.load(path)


def test_from_dict_rejects_wrong_types():
    data = Config.default().to_dict()
    data["taskwarrior"]["sync_enabled"] = "yes"
    with pytest.raises(ValueError, match="sync_enabled"):
        Config.from_dict(data)


def test_from_dict_requires_sections():
    data = Config.default().to_dict()
    del data["theme"]
    with pytest.raises(ValueError, match="theme"):
        Config.from_dict(data)


def test_default_config_path():
    assert default_config_path().parts[-2:] == ("lazytask", "config.toml")