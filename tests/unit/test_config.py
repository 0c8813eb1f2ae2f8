"""Runtime configuration: file loading, environment overrides and log gating."""

import json

import pytest

from ember.config import EmberConfig


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("EMBER_DEBUG", raising=False)
    monkeypatch.delenv("EMBER_MAX_DEPTH", raising=False)
    return monkeypatch


def test_defaults_without_file(tmp_path, clean_env):
    cfg = EmberConfig(path=tmp_path / "missing.json")
    assert cfg.debug_level == "none"
    assert cfg.max_depth == 1000
    assert not cfg.enable_debug_logs
    assert not cfg.should_log("debug")


def test_loads_persistent_file(tmp_path, clean_env):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"debug_level": "minimal", "max_depth": 500}))
    cfg = EmberConfig(path=path)
    assert cfg.debug_level == "minimal"
    assert cfg.max_depth == 500
    assert cfg.should_log("minimal")
    assert not cfg.should_log("debug")


def test_environment_overrides_file(tmp_path, clean_env):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"debug_level": "none"}))
    clean_env.setenv("EMBER_DEBUG", "1")
    clean_env.setenv("EMBER_MAX_DEPTH", "2000")
    cfg = EmberConfig(path=path)
    assert cfg.debug_level == "debug"
    assert cfg.max_depth == 2000
    assert cfg.should_log("debug")
    assert cfg.should_log("minimal")


def test_malformed_file_is_ignored(tmp_path, clean_env, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    cfg = EmberConfig(path=path)
    assert cfg.as_dict() == {"debug_level": "none", "max_depth": 1000}
    assert "Ignoring unreadable config file" in caplog.text


def test_invalid_values_are_ignored(tmp_path, clean_env, caplog):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"debug_level": "loud", "max_depth": 5}))
    cfg = EmberConfig(path=path)
    assert cfg.debug_level == "none"
    assert cfg.max_depth == 1000
    assert "Ignoring config value" in caplog.text


def test_setters_validate():
    cfg = EmberConfig(load=False)
    cfg.debug_level = True
    assert cfg.debug_level == "debug"
    cfg.debug_level = "off"
    assert cfg.debug_level == "none"
    with pytest.raises(ValueError):
        cfg.debug_level = "verbose"
    with pytest.raises(ValueError):
        cfg.max_depth = 10


def test_save_round_trips(tmp_path, clean_env):
    path = tmp_path / "nested" / "config.json"
    cfg = EmberConfig(path=path, load=False)
    cfg.max_depth = 4321
    cfg.save()
    assert EmberConfig(path=path).max_depth == 4321
