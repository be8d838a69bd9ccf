# tests/core/test_config_management.py
import copy
import json

import pytest

from wsh.core.context.shell_context import ShellContext
from wsh.core.managers.config_manager import ConfigManager
from wsh.core.utils.path_utils import PathUtils

MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING"
    },
    "history": {
        "capacity": 7
    },
    "shell": {
        "prompt": "test> ",
        "default_path": "/bin"
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Points the ConfigManager singleton at a temporary settings.json and
    restores the original configuration afterwards.
    """
    package_root = tmp_path / "wsh"
    package_root.mkdir()
    (package_root / "settings.json").write_text(json.dumps(MOCK_SETTINGS_CONTENT))

    monkeypatch.setattr(PathUtils, "get_shell_package_root", lambda: package_root)

    manager = ConfigManager()
    original = copy.deepcopy(manager._config)
    manager.reset()
    yield manager
    manager._config = original


def test_singleton():
    assert ConfigManager() is ConfigManager()


def test_shipped_settings_are_loaded():
    manager = ConfigManager()
    assert manager.get_nested("history.capacity") == 5
    assert manager.get_nested("shell.default_path") == "/bin"
    assert manager.get_nested("ls.command")[0] == "/bin/ls"


def test_config_manager_load(config_env):
    assert config_env.get_nested("shell.prompt") == "test> "


def test_config_manager_get_nested(config_env):
    assert config_env.get_nested("history.capacity") == 7
    assert config_env.get_nested("non.existent.key", "default") == "default"


def test_config_manager_reset(config_env):
    config_env._config["debug"]["level"] = "DEBUG"
    config_env.reset()
    assert config_env.get_nested("debug.level") == "WARNING"


def test_missing_settings_file_gives_empty_config(config_env, tmp_path, monkeypatch):
    monkeypatch.setattr(PathUtils, "get_shell_package_root", lambda: tmp_path / "nowhere")
    config_env.reset()
    assert config_env.get_nested("shell.prompt") is None
    assert config_env.get_nested("history.capacity", 5) == 5


def test_context_uses_configured_history_capacity(config_env):
    assert ShellContext().history.capacity == 7
    assert ShellContext(history_capacity=2).history.capacity == 2
