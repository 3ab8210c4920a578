from __future__ import annotations

import json

import pytest

import settings
from core.config import DEFAULT_LEADERBOARD_KINDS
from core.errors import ConfigError
from core.models import ActionKind


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    monkeypatch.delenv("ARCHUB_CONFIG", raising=False)
    monkeypatch.delenv("ARCHUB_INPUT", raising=False)


def test_missing_config_uses_defaults(tmp_path) -> None:
    loaded = settings.load_settings(config_path=str(tmp_path / "config.json"))

    assert loaded.input_path == "archub.csv"
    assert loaded.analyzer.bot_handle == "ARCHUB#9901"
    assert loaded.analyzer.excluded_subject == "ARCMF"
    assert loaded.analyzer.bucket_days == 7
    assert loaded.analyzer.leaderboard_size == 50
    assert loaded.analyzer.fill_gaps is False
    assert loaded.analyzer.leaderboard_kinds == DEFAULT_LEADERBOARD_KINDS
    assert loaded.logging == {}


def test_config_file_values(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "input_path": "export.csv",
                "bot_handle": "BOT#1",
                "bucket_days": 14,
                "leaderboard_size": "10",
                "fill_gaps": True,
                "leaderboards": ["Comment", "verify"],
                "date_formats": ["%d/%m/%Y"],
                "logging": {"enabled": True},
            }
        ),
        encoding="utf-8",
    )
    loaded = settings.load_settings(config_path=str(path))

    assert loaded.input_path == "export.csv"
    assert loaded.analyzer.bot_handle == "BOT#1"
    assert loaded.analyzer.bucket_days == 14
    assert loaded.analyzer.leaderboard_size == 10
    assert loaded.analyzer.fill_gaps is True
    assert loaded.analyzer.leaderboard_kinds == (ActionKind.COMMENT_ADDED, ActionKind.VERIFY)
    assert loaded.analyzer.date_formats == ("%d/%m/%Y",)
    assert loaded.logging == {"enabled": True}


def test_input_path_precedence(tmp_path, monkeypatch) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"input_path": "from-config.csv"}), encoding="utf-8")

    assert settings.load_settings(config_path=str(path)).input_path == "from-config.csv"
    monkeypatch.setenv("ARCHUB_INPUT", "from-env.csv")
    assert settings.load_settings(config_path=str(path)).input_path == "from-env.csv"
    assert settings.load_settings(config_path=str(path), input_path="arg.csv").input_path == "arg.csv"


def test_config_path_from_env(tmp_path, monkeypatch) -> None:
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"bucket_days": 3}), encoding="utf-8")
    monkeypatch.setenv("ARCHUB_CONFIG", str(path))

    assert settings.load_settings().analyzer.bucket_days == 3


def test_invalid_values_raise(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"leaderboards": ["likes"]}), encoding="utf-8")
    with pytest.raises(ConfigError):
        settings.load_settings(config_path=str(path))

    path.write_text(json.dumps({"bucket_days": "weekly"}), encoding="utf-8")
    with pytest.raises(ConfigError):
        settings.load_settings(config_path=str(path))

    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        settings.load_settings(config_path=str(path))


def test_non_bool_and_non_list_values_raise(tmp_path) -> None:
    path = tmp_path / "config.json"
    for raw in ({"fill_gaps": "false"}, {"date_formats": "%d/%m/%Y"}, {"leaderboards": "submit"}, {"date_formats": [1]}):
        path.write_text(json.dumps(raw), encoding="utf-8")
        with pytest.raises(ConfigError):
            settings.load_settings(config_path=str(path))
