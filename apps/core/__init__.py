"""
Core application package.

Shared infrastructure for the project apps: cache key helpers and
structured logging utilities.

Keep this file free of side effects so imports remain predictable
and safe in management commands and tests.
"""

__all__: list[str] = []
