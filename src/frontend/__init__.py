"""Textual dashboard for archub-analyzer reports."""
