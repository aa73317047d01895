"""CLI helpers for ROSTER: status lines and URL display."""

from .display import error, sanitize_url, success, warn

__all__ = ["sanitize_url", "warn", "success", "error"]
