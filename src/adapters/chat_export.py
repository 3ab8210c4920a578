"""Chat export file adapter.

Keeps file handling out of the core: the export is opened here, streamed
line by line into the core reader, and closed once analysis finishes or
fails.
"""

from __future__ import annotations

import logging
import os
from typing import List, Union

from core.analyzer import ActionAnalyzer
from core.config import AnalyzerConfig
from core.models import AnalysisReport, ChatMessage
from core.reader import read_messages

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def load_messages(path: PathLike, config: AnalyzerConfig) -> List[ChatMessage]:
    """Read every bot message from the export at ``path``."""

    LOGGER.info("Reading chat export %s", path)
    with open(path, "r", encoding="utf-8-sig", newline="") as handle:
        messages = list(read_messages(handle, config.bot_handle, config.date_formats))
    LOGGER.info("Loaded %s messages from %s", len(messages), config.bot_handle)
    return messages


def analyze_file(path: PathLike, config: AnalyzerConfig) -> AnalysisReport:
    """Analyze the export at ``path`` with ``config``."""

    return ActionAnalyzer(config).analyze(load_messages(path, config))
