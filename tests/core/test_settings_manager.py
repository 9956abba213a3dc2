"""
test_settings_manager.py
------------------------
Unit tests for persisted user settings.
"""

import json

import pytest

from corgi_run.core.services import settings_manager
from corgi_run.core.services.settings_manager import SettingsManager, get_settings, reset_settings


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "settings.json"


def test_defaults_when_file_missing(settings_path):
    settings = SettingsManager(settings_path)
    assert settings.get("audio", "bgm_volume") == 0.4
    assert settings.get("audio", "sfx_volume") == 0.6
    assert settings.get("graphics", "fps_limit") == 60
    assert settings.get("audio", "unknown", "fallback") == "fallback"


def test_partial_file_merged_over_defaults(settings_path):
    settings_path.write_text(json.dumps({"audio": {"bgm_volume": 0.9}}))
    settings = SettingsManager(settings_path)

    assert settings.get("audio", "bgm_volume") == 0.9
    assert settings.get("audio", "sfx_volume") == 0.6
    assert settings.get("graphics", "show_fps") is False


@pytest.mark.parametrize("content", ["{oops", "[1, 2, 3]"])
def test_bad_file_falls_back_to_defaults(settings_path, content):
    settings_path.write_text(content)
    settings = SettingsManager(settings_path)
    assert settings.settings == SettingsManager.DEFAULTS


def test_save_then_reload(settings_path):
    settings = SettingsManager(settings_path)
    settings.set("audio", "sfx_volume", 0.2)
    settings.save()

    assert SettingsManager(settings_path).get("audio", "sfx_volume") == 0.2


def test_reset_to_defaults_does_not_alias(settings_path):
    settings = SettingsManager(settings_path)
    settings.reset_to_defaults()
    settings.set("audio", "bgm_volume", 0.0)
    assert SettingsManager.DEFAULTS["audio"]["bgm_volume"] == 0.4


def test_singleton_reset(monkeypatch, settings_path):
    monkeypatch.setattr(SettingsManager, "SETTINGS_FILE", str(settings_path))
    reset_settings()
    first = get_settings()
    assert get_settings() is first

    reset_settings()
    assert settings_manager._SETTINGS is None
    assert get_settings() is not first
    reset_settings()
