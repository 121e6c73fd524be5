"""Integration tests.

Purpose
- Run the SQLAlchemy row helpers against a real (in-memory SQLite) engine.

Guidelines
- Use the shared ``sqlite_engine_memory`` fixture from ``tests/fixtures``.
"""
