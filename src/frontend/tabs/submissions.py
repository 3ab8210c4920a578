"""Submissions tab: maps created per period as a sparkline and a table."""

from __future__ import annotations

from typing import Any, Sequence

from textual import on
from textual.containers import Container, Vertical
from textual.widgets import DataTable, Sparkline, Static

from adapters.report_formatting import DATE_FORMAT, format_bucket_label
from core.models import Bucket

from ..constants import EMPTY_TEXT


class SubmissionsTab(Container):
    """Chart of distinct missions submitted per bucket."""

    def __init__(self, buckets: Sequence[Bucket], bucket_days: int, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._buckets = list(buckets)
        self._bucket_days = bucket_days

    def compose(self):
        with Vertical(id="submissions-panel"):
            yield Static(self._summary_text(), id="submissions-summary")
            yield Sparkline([bucket.count for bucket in self._buckets], summary_function=max, id="submissions-chart")
            yield DataTable(id="bucket-table", cursor_type="row")
            yield Static("", id="bucket-detail")

    def on_mount(self) -> None:
        table = self.query_one("#bucket-table", DataTable)
        table.add_column("period", key="period_start", width=12)
        table.add_column("maps", key="count", width=6)
        table.add_column("missions", key="subjects")
        table.zebra_stripes = True
        table.styles.height = "1fr"
        for bucket in self._buckets:
            table.add_row(
                bucket.period_start.strftime(DATE_FORMAT),
                str(bucket.count),
                bucket.label,
                key=bucket.period_start.isoformat(),
            )

    @on(DataTable.RowHighlighted, "#bucket-table")
    def _on_bucket_highlighted(self, event: DataTable.RowHighlighted) -> None:
        self.query_one("#bucket-detail", Static).update(format_bucket_label(self._buckets[event.cursor_row]))

    def _summary_text(self) -> str:
        if not self._buckets:
            return EMPTY_TEXT
        total = sum(bucket.count for bucket in self._buckets)
        first = self._buckets[0].period_start.strftime(DATE_FORMAT)
        last = self._buckets[-1].period_start.strftime(DATE_FORMAT)
        return f"{total} maps created, {first} to {last}, {self._bucket_days}-day buckets"
