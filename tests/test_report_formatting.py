from __future__ import annotations

from datetime import date, datetime

from rich.console import Console

from adapters.report_formatting import (
    build_bucket_table,
    build_leaderboard_table,
    format_bucket_label,
    format_buckets,
    format_leaderboard,
)
from core.models import Action, ActionKind, Bucket, LeaderboardEntry


def _submit(subject: str) -> Action:
    return Action(row=0, author="Alice", kind=ActionKind.SUBMIT, subject=subject, timestamp=datetime(2021, 1, 8))


def _render(renderable) -> str:
    console = Console(record=True, width=120)
    console.print(renderable)
    return console.export_text()


def test_bucket_label_lists_missions() -> None:
    bucket = Bucket(period_start=date(2021, 1, 7), members=(_submit("MyMap"), _submit("OtherMap")))
    assert format_bucket_label(bucket) == "2021-01-07 => MyMap | OtherMap"


def test_empty_bucket_label_is_date_only() -> None:
    assert format_bucket_label(Bucket(period_start=date(2021, 1, 14))) == "2021-01-14"


def test_plain_leaderboard_format() -> None:
    entries = [LeaderboardEntry(rank=1, author="Bob", count=3), LeaderboardEntry(rank=2, author="Alice", count=2)]
    text = format_leaderboard(ActionKind.COMMENT_ADDED, entries)

    assert "Comments" in text
    assert "1. Bob | Count: 3" in text
    assert text.strip().splitlines()[-1] == "2. Alice | Count: 2"


def test_rich_tables_render_rows() -> None:
    leaderboard = _render(build_leaderboard_table(ActionKind.VERIFY, [LeaderboardEntry(1, "Carol", 5)]))
    assert "Most verified" in leaderboard
    assert "Carol" in leaderboard

    buckets = _render(build_bucket_table([Bucket(period_start=date(2021, 1, 7), members=(_submit("MyMap"),))], 7))
    assert "2021-01-07" in buckets
    assert "MyMap" in buckets


def test_plain_buckets_use_bucket_labels() -> None:
    buckets = [
        Bucket(period_start=date(2021, 1, 7), members=(_submit("MyMap"), _submit("OtherMap"))),
        Bucket(period_start=date(2021, 1, 14)),
    ]
    assert format_buckets(buckets).splitlines() == [
        "   2  2021-01-07 => MyMap | OtherMap",
        "   0  2021-01-14",
    ]
