"""Core domain package for archub-analyzer.

Core contains parsing, classification, deduplication, bucketing and ranking
logic without any file, terminal or chart-specific code, keeping the
business logic portable.
"""
