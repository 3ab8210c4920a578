"""Main Textual app for the archub-analyzer dashboard."""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Center, Container, Horizontal, Vertical
from textual.widgets import ContentSwitcher, Footer, Static, Tab, Tabs

from adapters.report_formatting import leaderboard_title
from core.models import AnalysisReport

from .constants import ARCHUB_GREEN
from .tabs.leaderboard import LeaderboardTab
from .tabs.submissions import SubmissionsTab

SUBMISSIONS_TAB = "submissions"
TAB_PREFIX = "tab-"


class DashboardApp(App):
    """Read-only dashboard over one AnalysisReport."""

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("ctrl+c", "quit", "Quit"),
    ]

    CSS = """
    Screen {
        background: #10191a;
        color: #e8f0ea;
    }

    #header {
        height: 5;
        padding: 1 4;
        border-bottom: solid #2a3a36;
    }

    #header-left, #header-right {
        width: 1fr;
    }

    #header-right {
        text-align: right;
    }

    .subtle {
        color: #b8c8bd;
    }

    #tabs-bar {
        height: 4;
        padding: 0 4;
        border-bottom: solid #2a3a36;
    }

    #submissions-chart {
        height: 8;
        margin: 1 0;
    }

    #content {
        padding: 1 4;
    }
    """

    def __init__(self, report: AnalysisReport, source: str, bucket_days: int, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._report = report
        self._source = source
        self._bucket_days = bucket_days

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            with Horizontal(id="header-row"):
                with Vertical(id="header-left"):
                    yield Static(self._title_text(), id="title")
                with Vertical(id="header-right"):
                    yield Static(f"source: {self._source}", classes="subtle")
                    yield Static(f"actions: {len(self._report.actions)}", classes="subtle")

        tabs = [Tab("Maps created", id=f"{TAB_PREFIX}{SUBMISSIONS_TAB}")]
        for kind in self._report.leaderboards:
            tabs.append(Tab(leaderboard_title(kind), id=f"{TAB_PREFIX}{kind.value}"))
        with Container(id="tabs-bar"):
            with Center(id="tabs-center"):
                yield Tabs(*tabs, id="tabs")

        with ContentSwitcher(id="content", initial=SUBMISSIONS_TAB):
            yield SubmissionsTab(self._report.buckets, self._bucket_days, id=SUBMISSIONS_TAB)
            for kind, entries in self._report.leaderboards.items():
                yield LeaderboardTab(kind, entries, id=kind.value)
        yield Footer()

    def on_tabs_tab_activated(self, event: Tabs.TabActivated) -> None:
        tab_id = event.tab.id or ""
        if not tab_id.startswith(TAB_PREFIX):
            return
        self.query_one("#content", ContentSwitcher).current = tab_id[len(TAB_PREFIX):]

    @staticmethod
    def _title_text() -> Text:
        text = Text("ARCHUB", style=f"bold {ARCHUB_GREEN}")
        text.append(" mission analyzer", style="bold")
        return text
