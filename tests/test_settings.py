"""
Tests for JSON settings persistence.
"""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from watersort.settings import DEFAULT_SETTINGS, load_settings, save_settings


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "config.json")
    assert settings == DEFAULT_SETTINGS
    assert settings is not DEFAULT_SETTINGS


def test_file_merged_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_states": 100_000}), encoding="utf-8")

    settings = load_settings(path)
    assert settings["max_states"] == 100_000
    assert settings["strict_mode"] is True


def test_invalid_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_save_then_load(tmp_path):
    path = tmp_path / "config.json"
    settings = DEFAULT_SETTINGS.copy()
    settings["strict_mode"] = False

    save_settings(settings, path)
    assert load_settings(path)["strict_mode"] is False
