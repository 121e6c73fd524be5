"""Adapters to external formats and libraries (databases)."""
