"""Core analysis pipeline.

This module is integration-agnostic. It consumes already-read chat messages
and returns an AnalysisReport, so callers decide where lines come from and
how results are displayed.

Stages run in a strict order:
1) Extract and classify actions, drop the excluded subject, sort by time
2) Keep the first submission per mission
3) Bucket submissions by period (optionally filling empty periods)
4) Rank authors for each requested action kind
"""

from __future__ import annotations

import logging
from typing import Iterable

from core.actions import extract_actions
from core.buckets import bucket_actions, fill_gaps
from core.config import AnalyzerConfig
from core.dedup import first_submissions
from core.leaderboard import rank_authors
from core.models import AnalysisReport, ChatMessage

LOGGER = logging.getLogger(__name__)


class ActionAnalyzer:
    """Turns bot messages into submission buckets and leaderboards."""

    def __init__(self, config: AnalyzerConfig) -> None:
        self._config = config

    @property
    def config(self) -> AnalyzerConfig:
        return self._config

    def analyze(self, messages: Iterable[ChatMessage]) -> AnalysisReport:
        """Run every stage over ``messages`` and collect the results."""

        config = self._config
        actions = extract_actions(messages, config.excluded_subject)
        LOGGER.info("Extracted %s actions", len(actions))

        submissions = first_submissions(actions)
        LOGGER.info("%s distinct missions submitted", len(submissions))

        buckets = bucket_actions(submissions, config.bucket_days)
        if config.fill_gaps:
            filled = fill_gaps(buckets, config.bucket_days)
            LOGGER.debug("Gap filling added %s empty buckets", len(filled) - len(buckets))
            buckets = filled

        leaderboards = {
            kind: rank_authors(actions, kind, config.leaderboard_size)
            for kind in config.leaderboard_kinds
        }
        for kind, entries in leaderboards.items():
            LOGGER.debug("Leaderboard %s has %s entries", kind.value, len(entries))

        return AnalysisReport(
            actions=actions,
            submissions=submissions,
            buckets=buckets,
            leaderboards=leaderboards,
        )
