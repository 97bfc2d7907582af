from pathlib import Path

import pytest
from pydantic import ValidationError

import clipboard_manager.config.factory as factory
from clipboard_manager.config import AppEnv, ClipboardManagerSettings, get_settings
from clipboard_manager.constants import EXTENSION_NAME
from clipboard_manager.logger import build_logging_config


def test_defaults():
    settings = ClipboardManagerSettings()
    assert settings.max_items == 10
    assert settings.preview_length == 50
    assert settings.settings_key == EXTENSION_NAME
    assert settings.language == "en"
    assert settings.save_debounce_seconds == 1.0
    assert settings.store_path.name == "clipboard_manager.db"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CLIPBOARD_MANAGER_MAX_ITEMS", "25")
    monkeypatch.setenv("CLIPBOARD_MANAGER_LANGUAGE", "zh")
    monkeypatch.setenv("CLIPBOARD_MANAGER_STORE_PATH", str(tmp_path / "s.db"))
    monkeypatch.setenv("CLIPBOARD_MANAGER_LOG_LEVEL", " DEBUG ")
    settings = ClipboardManagerSettings()
    assert settings.max_items == 25
    assert settings.language == "zh"
    assert settings.store_path == Path(tmp_path / "s.db")
    assert settings.log_level == "debug"


@pytest.mark.parametrize("value", ["0", "-4"])
def test_capacity_is_clamped_at_configuration(monkeypatch, value):
    monkeypatch.setenv("CLIPBOARD_MANAGER_MAX_ITEMS", value)
    assert ClipboardManagerSettings().max_items == 1


def test_invalid_values_are_rejected():
    with pytest.raises(ValidationError):
        ClipboardManagerSettings(language="fr")
    with pytest.raises(ValidationError):
        ClipboardManagerSettings(max_items="lots")
    with pytest.raises(ValidationError):
        ClipboardManagerSettings(preview_length=0)


def test_get_settings_is_cached(monkeypatch):
    first = get_settings(ClipboardManagerSettings)
    monkeypatch.setenv("CLIPBOARD_MANAGER_MAX_ITEMS", "3")
    assert get_settings(ClipboardManagerSettings) is first
    get_settings.cache_clear()
    assert get_settings(ClipboardManagerSettings).max_items == 3


@pytest.mark.parametrize("env", ["prod", "docker", "dev"])
def test_environment_variable_wins(monkeypatch, env):
    monkeypatch.setenv("ENVIRONMENT", env)
    assert AppEnv.environment() == env


def test_logging_config(tmp_path):
    config = build_logging_config(tmp_path / "log.jsonl", "info", console=False)
    assert set(config["handlers"]) == {"file"}
    assert config["handlers"]["file"]["level"] == "INFO"
    assert config["loggers"]["clipboard_manager"]["handlers"] == ["file"]
    with_console = build_logging_config(tmp_path / "log.jsonl", "debug")
    assert with_console["loggers"]["clipboard_manager"]["handlers"] == ["file", "console"]


def test_invalid_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("CLIPBOARD_MANAGER_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        ClipboardManagerSettings()


def test_yaml_files_are_layered(monkeypatch, tmp_path):
    monkeypatch.setattr(factory, "APP_ROOT", tmp_path)
    monkeypatch.setattr(factory, "APP_ENV", "test")
    (tmp_path / "config.yaml").write_text(
        "CLIPBOARD_MANAGER_MAX_ITEMS: 7\nCLIPBOARD_MANAGER_LANGUAGE: zh\n", encoding="utf-8"
    )
    (tmp_path / "config.test.yaml").write_text(
        "CLIPBOARD_MANAGER_MAX_ITEMS: 4\n", encoding="utf-8"
    )
    assert ClipboardManagerSettings.config_files() == [
        tmp_path / "config.yaml",
        tmp_path / "config.test.yaml",
    ]
    settings = ClipboardManagerSettings()
    assert settings.max_items == 4
    assert settings.language == "zh"

    monkeypatch.setenv("CLIPBOARD_MANAGER_MAX_ITEMS", "9")
    assert ClipboardManagerSettings().max_items == 9
