"""Configuration loading for archub-analyzer.

All user-editable settings (input path, bot handle, bucket size, leaderboards,
logging) live in a single optional JSON file for quick edits without touching
Python. A missing file means the legacy defaults.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Optional

from dotenv import load_dotenv

from core.config import (
    DEFAULT_BOT_HANDLE,
    DEFAULT_BUCKET_DAYS,
    DEFAULT_DATE_FORMATS,
    DEFAULT_EXCLUDED_SUBJECT,
    DEFAULT_LEADERBOARD_KINDS,
    DEFAULT_LEADERBOARD_SIZE,
    AnalyzerConfig,
)
from core.errors import ConfigError
from core.models import ActionKind

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# config.json sits next to the export by default; ARCHUB_CONFIG overrides it.
CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.json")

DEFAULT_INPUT_PATH = "archub.csv"


@dataclass(frozen=True)
class Settings:
    """Everything the CLI needs to run one analysis."""

    input_path: str
    analyzer: AnalyzerConfig
    logging: dict[str, Any] = field(default_factory=dict)


def _load_json_config(path: str) -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(path):
        return {}

    with open(path, "r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be an object: {path}")
    return data


def parse_kinds(names: list[str]) -> tuple[ActionKind, ...]:
    """Map leaderboard names like "submit" or "comment" to ActionKind values."""

    kinds: list[ActionKind] = []
    for name in names:
        try:
            kinds.append(ActionKind(str(name).lower()))
        except ValueError as exc:
            valid = ", ".join(kind.value for kind in ActionKind)
            raise ConfigError(f"Unknown leaderboard kind {name!r} (expected one of: {valid})") from exc
    return tuple(kinds)


def _int_setting(raw: dict, key: str, default: int) -> int:
    value = raw.get(key, default)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be an integer, got {value!r}") from exc


def _bool_setting(raw: dict, key: str, default: bool) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value


def _list_setting(raw: dict, key: str) -> Optional[list[str]]:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key} must be a list of strings, got {value!r}")
    return value


def build_analyzer_config(raw: dict) -> AnalyzerConfig:
    """Build the core config from the raw JSON mapping."""

    kinds = _list_setting(raw, "leaderboards")
    date_formats = _list_setting(raw, "date_formats")
    return AnalyzerConfig(
        bot_handle=str(raw.get("bot_handle", DEFAULT_BOT_HANDLE)),
        excluded_subject=str(raw.get("excluded_subject", DEFAULT_EXCLUDED_SUBJECT)),
        bucket_days=_int_setting(raw, "bucket_days", DEFAULT_BUCKET_DAYS),
        leaderboard_size=_int_setting(raw, "leaderboard_size", DEFAULT_LEADERBOARD_SIZE),
        fill_gaps=_bool_setting(raw, "fill_gaps", False),
        leaderboard_kinds=parse_kinds(kinds) if kinds is not None else DEFAULT_LEADERBOARD_KINDS,
        date_formats=tuple(date_formats) if date_formats else DEFAULT_DATE_FORMATS,
    )


def load_settings(config_path: Optional[str] = None, input_path: Optional[str] = None) -> Settings:
    """Load settings from config.json, .env and explicit overrides.

    Precedence for the input path: argument, ARCHUB_INPUT, config.json, default.
    """

    load_dotenv()
    path = config_path or os.getenv("ARCHUB_CONFIG") or CONFIG_PATH
    raw = _load_json_config(path)

    resolved_input = input_path or os.getenv("ARCHUB_INPUT") or raw.get("input_path") or DEFAULT_INPUT_PATH
    return Settings(
        input_path=str(resolved_input),
        analyzer=build_analyzer_config(raw),
        logging=raw.get("logging", {}) or {},
    )
