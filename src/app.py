"""Application entry point for archub-analyzer."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint
from rich.console import Console
from rich.logging import RichHandler

import settings
from adapters.chat_export import analyze_file
from adapters.report_formatting import (
    build_bucket_table,
    build_leaderboard_table,
    format_buckets,
    format_leaderboard,
)
from core.errors import AnalyzerError
from core.models import AnalysisReport

NAME = "ARCHUB"
FONT = "tarty-1"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOGGER = logging.getLogger(__name__)


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _build_handlers(config: dict, level: int) -> list[logging.Handler]:
    """Console output goes through rich so log lines share the report's styling."""

    handlers: list[logging.Handler] = []
    if config.get("console", True):
        console_handler = RichHandler(console=Console(stderr=True), show_path=False)
        console_handler.setLevel(level)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/archub.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
            backupCount=int(file_cfg.get("backup_count", 5)),
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        handlers.append(file_handler)
    return handlers


def _configure_logging(config: dict) -> None:
    if not config.get("enabled", False):
        return

    level = getattr(logging, str(config.get("level", "INFO")).upper(), logging.INFO)
    handlers = _build_handlers(config, level)
    if handlers:
        logging.basicConfig(level=level, handlers=handlers)


def _print_report(report: AnalysisReport, bucket_days: int, plain: bool) -> None:
    if plain:
        print(format_buckets(report.buckets))
        for kind, entries in report.leaderboards.items():
            print(format_leaderboard(kind, entries))
        return

    console = Console()
    console.print(build_bucket_table(report.buckets, bucket_days))
    for kind, entries in report.leaderboards.items():
        console.print()
        console.print(build_leaderboard_table(kind, entries))


def _load(args: argparse.Namespace) -> tuple[settings.Settings, AnalysisReport]:
    loaded = settings.load_settings(config_path=args.config, input_path=args.input)
    if args.fill_gaps:
        loaded = replace(loaded, analyzer=replace(loaded.analyzer, fill_gaps=True))
    _configure_logging(loaded.logging)
    LOGGER.info("Analyzing %s for %s", loaded.input_path, loaded.analyzer.bot_handle)
    return loaded, analyze_file(loaded.input_path, loaded.analyzer)


def _report(args: argparse.Namespace) -> None:
    if not args.plain:
        _print_banner()
    loaded, report = _load(args)
    _print_report(report, loaded.analyzer.bucket_days, args.plain)


def _dashboard(args: argparse.Namespace) -> None:
    from frontend.app import DashboardApp

    loaded, report = _load(args)
    DashboardApp(report, source=loaded.input_path, bucket_days=loaded.analyzer.bucket_days).run()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="archub-analyzer")
    parser.add_argument(
        "command",
        nargs="?",
        choices=["report", "dashboard"],
        default="report",
        help="Print buckets and leaderboards, or open the terminal dashboard",
    )
    parser.add_argument("--input", help="Path to the chat export (default: archub.csv)")
    parser.add_argument("--config", help="Path to config.json")
    parser.add_argument("--fill-gaps", action="store_true", help="Add empty periods to the series")
    parser.add_argument("--plain", action="store_true", help="Plain text report without tables")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "dashboard":
            _dashboard(args)
        else:
            _report(args)
    except (AnalyzerError, OSError) as exc:
        LOGGER.error("Analysis failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
