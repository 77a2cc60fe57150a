import json
import os

import pytest

from config import Config


@pytest.fixture
def restore_config(monkeypatch):
    """Snapshot the attributes a test may overwrite."""
    for key in ("array_size", "default_speed_ms", "log_level", "config_file"):
        monkeypatch.setattr(Config, key, getattr(Config, key))
    return monkeypatch


def test_load_from_file_sets_known_keys_only(tmp_path, restore_config):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"array_size": 12, "default_speed_ms": 250, "bogus": 1}))

    Config.load_from_file(str(path))

    assert Config.array_size == 12
    assert Config.default_speed_ms == 250
    assert not hasattr(Config, "bogus")
    assert Config.config_file == os.path.abspath(str(path))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load_from_file(str(tmp_path / "missing.json"))


def test_load_from_env(tmp_path, restore_config):
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"log_level": "DEBUG"}))

    restore_config.delenv(Config.ENV_VAR, raising=False)
    assert Config.load_from_env() is False

    restore_config.setenv(Config.ENV_VAR, str(path))
    assert Config.load_from_env() is True
    assert Config.log_level == "DEBUG"


def test_as_dict_lists_settings():
    settings = Config.as_dict()
    assert settings["port"] == 5000
    assert "load_from_file" not in settings
    assert "ENV_VAR" not in settings
