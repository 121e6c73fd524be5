"""Unit tests.

Purpose
- Check one module of reflowkit in isolation: the reflow engine, the text,
  markup and URI helpers, configuration, logging setup and CLI helpers.

Guidelines
- No database, network or real terminal; environment changes go through
  ``monkeypatch``.
- Hypothesis property tests sit next to the example-based tests they extend.
"""
