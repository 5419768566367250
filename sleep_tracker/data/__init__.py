"""Persistence layer: SQLite schema and repositories for night records."""
