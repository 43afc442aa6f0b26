"""Tests for settings defaults, the config file and environment overrides."""

import json
import os

import pytest

from gitsubscribe.config.settings import Settings, default_config_path, default_data_dir
from gitsubscribe.config.settings_manager import SettingsManager
from gitsubscribe.errors import ConfigError, ErrorKind


@pytest.fixture
def xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "share"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    return tmp_path


class TestDefaults:
    def test_data_dir_follows_xdg(self, xdg):
        assert default_data_dir() == str(xdg / "share" / "git_subscribe")

    def test_data_dir_without_xdg(self, monkeypatch):
        monkeypatch.delenv("XDG_DATA_HOME", raising=False)
        assert default_data_dir() == os.path.expanduser("~/.local/share/git_subscribe")

    def test_config_path_follows_xdg(self, xdg):
        assert default_config_path() == str(xdg / "config" / "git_subscribe" / "config.json")

    def test_data_file(self, xdg):
        settings = Settings()
        assert settings.data_file == str(xdg / "share" / "git_subscribe" / "data.json")

    def test_log_path_next_to_data(self, tmp_path):
        settings = Settings(data_dir=str(tmp_path))
        assert settings.log_path == str(tmp_path / "git_subscribe.log")

    def test_explicit_log_file(self, tmp_path):
        settings = Settings(data_dir=str(tmp_path), log_file=str(tmp_path / "other.log"))
        assert settings.log_path == str(tmp_path / "other.log")


class TestSettingsManager:
    def test_missing_config_uses_defaults(self, xdg):
        manager = SettingsManager(environ={})
        assert manager.settings == Settings()
        assert not os.path.exists(manager.config_path)

    def test_config_file_overrides_defaults(self, tmp_path, xdg):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({
            "data_dir": str(tmp_path / "custom"),
            "log_level": "debug",
            "path_column_width": 50,
        }))
        settings = SettingsManager(config_path=str(config), environ={}).settings
        assert settings.data_dir == str(tmp_path / "custom")
        assert settings.log_level == "DEBUG"
        assert settings.path_column_width == 50

    def test_environment_overrides_config_file(self, tmp_path, xdg):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"data_dir": str(tmp_path / "from-file")}))
        environ = {
            "GIT_SUBSCRIBE_DATA_DIR": str(tmp_path / "from-env"),
            "GIT_SUBSCRIBE_LOG_LEVEL": "info",
        }
        settings = SettingsManager(config_path=str(config), environ=environ).settings
        assert settings.data_dir == str(tmp_path / "from-env")
        assert settings.log_level == "INFO"

    def test_config_path_from_environment(self, tmp_path, xdg):
        config = tmp_path / "elsewhere.json"
        config.write_text(json.dumps({"path_column_width": 12}))
        manager = SettingsManager(environ={"GIT_SUBSCRIBE_CONFIG": str(config)})
        assert manager.config_path == str(config)
        assert manager.settings.path_column_width == 12

    def test_unknown_keys_are_ignored(self, tmp_path, xdg, caplog):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"theme": "tokyo-night"}))
        settings = SettingsManager(config_path=str(config), environ={}).settings
        assert not hasattr(settings, "theme")
        assert "Ignoring unknown setting 'theme'" in caplog.text

    @pytest.mark.parametrize("content", ["{broken", "[1, 2]"])
    def test_malformed_config(self, tmp_path, xdg, content):
        config = tmp_path / "config.json"
        config.write_text(content)
        with pytest.raises(ConfigError) as exc_info:
            SettingsManager(config_path=str(config), environ={})
        assert exc_info.value.kind is ErrorKind.CONFIG

    def test_unreadable_config(self, tmp_path, xdg):
        config = tmp_path / "config.json"
        config.mkdir()
        with pytest.raises(ConfigError):
            SettingsManager(config_path=str(config), environ={})

    def test_unknown_log_level(self, xdg):
        with pytest.raises(ConfigError, match="Unknown log level"):
            SettingsManager(environ={"GIT_SUBSCRIBE_LOG_LEVEL": "chatty"})

    @pytest.mark.parametrize("width", ["wide", -1, True])
    def test_invalid_column_width(self, tmp_path, xdg, width):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"path_column_width": width}))
        with pytest.raises(ConfigError, match="path_column_width"):
            SettingsManager(config_path=str(config), environ={})

    @pytest.mark.parametrize("content, key", [
        ({"data_dir": None}, "data_dir"),
        ({"data_dir": 5}, "data_dir"),
        ({"data_dir": ""}, "data_dir"),
        ({"data_file_name": []}, "data_file_name"),
        ({"log_file": 3}, "log_file"),
        ({"log_level": 10}, "log_level"),
    ])
    def test_wrongly_typed_values(self, tmp_path, xdg, content, key):
        config = tmp_path / "config.json"
        config.write_text(json.dumps(content))
        with pytest.raises(ConfigError, match=key) as exc_info:
            SettingsManager(config_path=str(config), environ={})
        assert exc_info.value.kind is ErrorKind.CONFIG

    def test_null_log_file_keeps_default(self, tmp_path, xdg):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"log_file": None}))
        settings = SettingsManager(config_path=str(config), environ={}).settings
        assert settings.log_file is None
