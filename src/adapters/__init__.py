"""Adapters between the core pipeline and files or terminals."""
