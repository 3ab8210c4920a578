"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to the export format or any presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Tuple


class ActionKind(Enum):
    """What the bot reported a user doing to a mission."""

    SUBMIT = "submit"
    UPDATE = "update"
    VERIFY = "verify"
    NOTE_ADDED = "note"
    COMMENT_ADDED = "comment"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ChatMessage:
    """One line of the chat export written by the tracked author."""

    row: int
    author: str
    timestamp: datetime
    content: str


@dataclass(frozen=True)
class Action:
    """A classified bot report attributed to a user and a mission."""

    row: int
    author: str
    kind: ActionKind
    subject: str
    timestamp: datetime


@dataclass(frozen=True)
class Bucket:
    """Submissions that fall in one period of the chart."""

    period_start: date
    members: Tuple[Action, ...] = ()

    @property
    def count(self) -> int:
        return len(self.members)

    @property
    def subjects(self) -> Tuple[str, ...]:
        return tuple(action.subject for action in self.members)

    @property
    def label(self) -> str:
        return " | ".join(self.subjects)


@dataclass(frozen=True)
class AuthorGroup:
    """All actions of one kind attributed to a single author."""

    author: str
    members: Tuple[Action, ...]

    @property
    def count(self) -> int:
        return len(self.members)


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    author: str
    count: int


@dataclass(frozen=True)
class AnalysisReport:
    """Everything a presentation layer needs from one analyzer run."""

    actions: Tuple[Action, ...]
    submissions: Tuple[Action, ...]
    buckets: Tuple[Bucket, ...]
    leaderboards: Dict[ActionKind, List[LeaderboardEntry]] = field(default_factory=dict)
