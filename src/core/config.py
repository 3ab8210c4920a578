"""Core configuration dataclasses.

We keep config parsing outside the core, but this dataclass defines the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from core.errors import ConfigError
from core.models import ActionKind

DEFAULT_BOT_HANDLE = "ARCHUB#9901"
DEFAULT_EXCLUDED_SUBJECT = "ARCMF"
DEFAULT_BUCKET_DAYS = 7
DEFAULT_LEADERBOARD_SIZE = 50

# Tried in order after ISO 8601. The first entry is what DiscordChatExporter
# writes for CSV exports.
DEFAULT_DATE_FORMATS: Tuple[str, ...] = (
    "%d-%b-%y %I:%M %p",
    "%d-%b-%Y %I:%M %p",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %H:%M",
    "%d.%m.%Y %H:%M",
    "%d/%m/%Y %H:%M",
)

DEFAULT_LEADERBOARD_KINDS: Tuple[ActionKind, ...] = (
    ActionKind.SUBMIT,
    ActionKind.UPDATE,
    ActionKind.VERIFY,
    ActionKind.NOTE_ADDED,
    ActionKind.COMMENT_ADDED,
)


@dataclass(frozen=True)
class AnalyzerConfig:
    """Settings for one analyzer run."""

    bot_handle: str = DEFAULT_BOT_HANDLE
    excluded_subject: str = DEFAULT_EXCLUDED_SUBJECT
    bucket_days: int = DEFAULT_BUCKET_DAYS
    leaderboard_size: int = DEFAULT_LEADERBOARD_SIZE
    fill_gaps: bool = False
    leaderboard_kinds: Tuple[ActionKind, ...] = DEFAULT_LEADERBOARD_KINDS
    date_formats: Tuple[str, ...] = field(default=DEFAULT_DATE_FORMATS)

    def __post_init__(self) -> None:
        if self.bucket_days < 1:
            raise ConfigError(f"bucket_days must be positive, got {self.bucket_days}")
        if self.leaderboard_size < 1:
            raise ConfigError(f"leaderboard_size must be positive, got {self.leaderboard_size}")
        if not self.bot_handle:
            raise ConfigError("bot_handle must not be empty")
