"""
Tests for persistent settings and the command line entry point.
"""

import json
import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main
from ring_arena import settings


def test_defaults_when_file_missing(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "SETTINGS_FILE", tmp_path / "config.json")

    loaded = settings.load_settings()

    assert loaded == settings.DEFAULT_SETTINGS
    assert loaded is not settings.DEFAULT_SETTINGS


def test_saved_settings_are_merged_with_defaults(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(settings, "SETTINGS_FILE", path)

    settings.save_settings({"strategy_name": "fast"})
    loaded = settings.load_settings()

    assert json.loads(path.read_text(encoding="utf-8")) == {"strategy_name": "fast"}
    assert loaded["strategy_name"] == "fast"
    assert loaded["max_turns"] == settings.DEFAULT_SETTINGS["max_turns"]


def test_invalid_file_falls_back_to_defaults(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(settings, "SETTINGS_FILE", path)

    path.write_text("{not json", encoding="utf-8")
    assert settings.load_settings() == settings.DEFAULT_SETTINGS

    path.write_text("[1, 2]", encoding="utf-8")
    assert settings.load_settings() == settings.DEFAULT_SETTINGS


def test_unknown_strategy_falls_back_to_default(tmp_path, monkeypatch, caplog):
    path = tmp_path / "config.json"
    monkeypatch.setattr(settings, "SETTINGS_FILE", path)
    path.write_text(json.dumps({"strategy_name": "greedy"}), encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        loaded = settings.load_settings()

    assert loaded["strategy_name"] == "best"
    assert "greedy" in caplog.text


def test_malformed_values_fall_back_to_defaults(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(settings, "SETTINGS_FILE", path)
    path.write_text(json.dumps({
        "max_turns": "many",
        "timeout_sec": "soon",
        "debug_enabled": "yes",
        "strategy_name": "fast",
    }), encoding="utf-8")

    loaded = settings.load_settings()

    assert loaded["max_turns"] == settings.DEFAULT_SETTINGS["max_turns"]
    assert loaded["timeout_sec"] is None
    assert loaded["debug_enabled"] is False
    assert loaded["strategy_name"] == "fast"


@pytest.mark.parametrize("values", [
    {"max_turns": 0},
    {"max_turns": True},
    {"max_turns": 2.5},
    {"timeout_sec": -1},
    {"timeout_sec": False},
])
def test_out_of_range_numbers_fall_back(tmp_path, monkeypatch, values):
    path = tmp_path / "config.json"
    monkeypatch.setattr(settings, "SETTINGS_FILE", path)
    path.write_text(json.dumps(values), encoding="utf-8")

    assert settings.load_settings() == settings.DEFAULT_SETTINGS


def test_valid_numbers_are_kept(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(settings, "SETTINGS_FILE", path)
    path.write_text(json.dumps({"max_turns": 5, "timeout_sec": 2}), encoding="utf-8")

    loaded = settings.load_settings()

    assert loaded["max_turns"] == 5
    assert loaded["timeout_sec"] == 2


def test_main_runs_commands(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(settings, "SETTINGS_FILE", tmp_path / "config.json")

    exit_code = main.main(["-c", "c2 124", "-c", "c3 3", "-c", "solve in 1"])

    assert exit_code == 0
    assert "Solution: r3 -1 (c2)" in capsys.readouterr().out


def test_main_reports_bad_command(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(settings, "SETTINGS_FILE", tmp_path / "config.json")

    exit_code = main.main(["-c", "c2 9"])

    assert exit_code == 1
    assert "out of bounds" in capsys.readouterr().err


def test_main_saves_strategy(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(settings, "SETTINGS_FILE", path)

    main.main(["--strategy", "fast", "-c", "show"])

    assert json.loads(path.read_text(encoding="utf-8"))["strategy_name"] == "fast"


def test_main_starts_with_stale_strategy(tmp_path, monkeypatch, capsys):
    path = tmp_path / "config.json"
    monkeypatch.setattr(settings, "SETTINGS_FILE", path)
    path.write_text(json.dumps({"strategy_name": "greedy"}), encoding="utf-8")

    exit_code = main.main(["-c", "c2 124", "-c", "c3 3", "-c", "solve in 1"])

    assert exit_code == 0
    assert "Solution: r3 -1 (c2)" in capsys.readouterr().out


def test_main_enables_debug_from_settings(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(settings, "SETTINGS_FILE", path)
    path.write_text(json.dumps({"debug_enabled": True}), encoding="utf-8")
    root = logging.getLogger()
    level = root.level

    try:
        main.main(["-c", "show"])
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(level)
