"""Shared constants for the Textual UI."""

from __future__ import annotations

ARCHUB_GREEN = "#5FB878"
EMPTY_TEXT = "No data"
