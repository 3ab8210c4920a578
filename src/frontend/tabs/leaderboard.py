"""Leaderboard tab for one action kind."""

from __future__ import annotations

from typing import Any, Sequence

from textual.containers import Container, Vertical
from textual.widgets import DataTable, Static

from adapters.report_formatting import leaderboard_title
from core.models import ActionKind, LeaderboardEntry

from ..constants import EMPTY_TEXT


class LeaderboardTab(Container):
    def __init__(self, kind: ActionKind, entries: Sequence[LeaderboardEntry], **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._kind = kind
        self._entries = list(entries)

    def compose(self):
        with Vertical(classes="leaderboard-panel"):
            yield Static(leaderboard_title(self._kind) if self._entries else EMPTY_TEXT, classes="leaderboard-title")
            yield DataTable(cursor_type="row", classes="leaderboard-table")

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.add_column("#", key="rank", width=4)
        table.add_column("author", key="author", width=32)
        table.add_column("count", key="count", width=8)
        table.zebra_stripes = True
        table.styles.height = "1fr"
        for entry in self._entries:
            table.add_row(str(entry.rank), entry.author, str(entry.count), key=entry.author)
