"""Integration tests against real SQLite databases (in-memory and temp files)."""
