"""Shared report formatting helpers.

Keeping formatting here prevents drift between the console report and the
dashboard and keeps labels consistent regardless of output.
"""

from __future__ import annotations

from typing import Iterable, List

from rich.table import Table

from core.models import ActionKind, Bucket, LeaderboardEntry

LEADERBOARD_TITLES = {
    ActionKind.SUBMIT: "Maps created",
    ActionKind.UPDATE: "Maps updated",
    ActionKind.VERIFY: "Most verified",
    ActionKind.NOTE_ADDED: "Notes",
    ActionKind.COMMENT_ADDED: "Comments",
    ActionKind.UNKNOWN: "Unclassified",
}

DATE_FORMAT = "%Y-%m-%d"


def leaderboard_title(kind: ActionKind) -> str:
    return LEADERBOARD_TITLES.get(kind, kind.value)


def format_bucket_label(bucket: Bucket) -> str:
    """Return ``date => map | map`` for a bucket, or just the date if empty."""

    date_text = bucket.period_start.strftime(DATE_FORMAT)
    if not bucket.members:
        return date_text
    return f"{date_text} => {bucket.label}"


def format_leaderboard(kind: ActionKind, entries: Iterable[LeaderboardEntry]) -> str:
    """Render a leaderboard as plain text, one ``rank. author | Count: n`` per line."""

    lines = ["", leaderboard_title(kind), ""]
    for entry in entries:
        lines.append(f"{entry.rank}. {entry.author} | Count: {entry.count}")
    return "\n".join(lines)


def format_buckets(buckets: Iterable[Bucket]) -> str:
    """Render one ``count  date => map | map`` line per bucket."""

    lines: List[str] = []
    for bucket in buckets:
        lines.append(f"{bucket.count:>4}  {format_bucket_label(bucket)}")
    return "\n".join(lines)


def build_leaderboard_table(kind: ActionKind, entries: Iterable[LeaderboardEntry]) -> Table:
    """Create the rich table used by the console report."""

    table = Table(title=leaderboard_title(kind), title_justify="left")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Author")
    table.add_column("Count", justify="right")
    for entry in entries:
        table.add_row(str(entry.rank), entry.author, str(entry.count))
    return table


def build_bucket_table(buckets: Iterable[Bucket], bucket_days: int) -> Table:
    """Create the rich table listing submissions per period."""

    table = Table(title=f"Maps created per {bucket_days} days", title_justify="left")
    table.add_column("Period start")
    table.add_column("Maps", justify="right")
    table.add_column("Missions", overflow="fold")
    for bucket in buckets:
        table.add_row(bucket.period_start.strftime(DATE_FORMAT), str(bucket.count), bucket.label)
    return table
