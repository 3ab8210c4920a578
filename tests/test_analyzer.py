from __future__ import annotations

from datetime import date

import pytest

from adapters.chat_export import analyze_file, load_messages
from core.analyzer import ActionAnalyzer
from core.config import AnalyzerConfig
from core.errors import ConfigError, FormatError
from core.models import ActionKind
from core.reader import read_messages

SCENARIO = [
    '"ARCHUB#9901";"2021-01-01";"**Alice** submitted a mission **MyMap**"',
    '"ARCHUB#9901";"2021-01-02";"**Alice** submitted a mission **MyMap**"',
    '"someone#0001";"2021-01-05";"**Eve** submitted a mission **Fake**"',
    '"ARCHUB#9901";"2021-01-10";"**Bob** submitted a mission **OtherMap**"',
    '"ARCHUB#9901";"2021-01-11";"**Bob** commented on **MyMap**"',
    '"ARCHUB#9901";"2021-01-12";"**Carol** commented on **ARCMF**"',
    '"ARCHUB#9901";"2021-01-13";"Alice commented: hi"',
]


def _analyze(lines: list[str], config: AnalyzerConfig = AnalyzerConfig()):
    messages = read_messages(lines, config.bot_handle, config.date_formats)
    return ActionAnalyzer(config).analyze(messages)


def test_scenario_dedup_and_buckets() -> None:
    report = _analyze(SCENARIO)

    assert [(action.subject, action.timestamp.date()) for action in report.submissions] == [
        ("MyMap", date(2021, 1, 1)),
        ("OtherMap", date(2021, 1, 10)),
    ]
    assert [(bucket.period_start, bucket.subjects) for bucket in report.buckets] == [
        (date(2020, 12, 31), ("MyMap",)),
        (date(2021, 1, 7), ("OtherMap",)),
    ]


def test_scenario_leaderboards_count_every_action() -> None:
    report = _analyze(SCENARIO)

    submit_board = report.leaderboards[ActionKind.SUBMIT]
    assert [(entry.author, entry.count) for entry in submit_board] == [("Alice", 2), ("Bob", 1)]
    comment_board = report.leaderboards[ActionKind.COMMENT_ADDED]
    assert [(entry.author, entry.count) for entry in comment_board] == [("Bob", 1)]
    assert ActionKind.UNKNOWN not in report.leaderboards


def test_excluded_subject_never_reaches_output() -> None:
    report = _analyze(SCENARIO)
    assert all(action.subject != "ARCMF" for action in report.actions)
    assert all("ARCMF" not in bucket.subjects for bucket in report.buckets)


def test_rows_trace_back_to_source_lines() -> None:
    report = _analyze(SCENARIO)
    assert [action.row for action in report.actions] == [0, 1, 3, 4]


def test_fill_gaps_is_opt_in() -> None:
    lines = [
        '"ARCHUB#9901";"2021-02-08";"**A** submitted **One**"',
        '"ARCHUB#9901";"2021-02-28";"**B** submitted **Two**"',
    ]
    assert len(_analyze(lines).buckets) == 2
    filled = _analyze(lines, AnalyzerConfig(fill_gaps=True)).buckets
    assert [bucket.count for bucket in filled] == [1, 0, 0, 1]


def test_custom_config_values() -> None:
    lines = [
        '"BOT";"2021-01-03";"**A** submitted **One**"',
        '"BOT";"2021-01-04";"**A** submitted **Skip**"',
    ]
    config = AnalyzerConfig(
        bot_handle="BOT",
        excluded_subject="Skip",
        bucket_days=2,
        leaderboard_kinds=(ActionKind.SUBMIT,),
    )
    report = _analyze(lines, config)
    assert [bucket.period_start for bucket in report.buckets] == [date(2021, 1, 2)]
    assert list(report.leaderboards) == [ActionKind.SUBMIT]


def test_invalid_config_is_rejected() -> None:
    with pytest.raises(ConfigError):
        AnalyzerConfig(bucket_days=0)
    with pytest.raises(ConfigError):
        AnalyzerConfig(leaderboard_size=0)


def test_analyze_file(tmp_path) -> None:
    path = tmp_path / "archub.csv"
    path.write_text("\n".join(SCENARIO) + "\n\n", encoding="utf-8")

    report = analyze_file(path, AnalyzerConfig())
    assert len(report.submissions) == 2


def test_load_messages_fails_fast_on_corrupt_line(tmp_path) -> None:
    path = tmp_path / "archub.csv"
    path.write_text(SCENARIO[0] + "\n" + '"ARCHUB#9901";"2021-01-02"\n', encoding="utf-8")

    with pytest.raises(FormatError):
        load_messages(path, AnalyzerConfig())


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        analyze_file(tmp_path / "absent.csv", AnalyzerConfig())
