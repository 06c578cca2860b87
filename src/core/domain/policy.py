"""Validation policy options.

Kept in the domain layer so that configuration, services and the CLI share a
single source of truth without importing each other.
"""

from __future__ import annotations

from enum import Enum


class ValidationPolicy(str, Enum):
    """How a validation pass reacts to an invalid record."""

    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"

    @classmethod
    def default(cls) -> "ValidationPolicy":
        """Abort on the first invalid record, like the original tool."""

        return cls.FAIL_FAST

    def label(self) -> str:
        """Human readable label for logging."""

        return "collect all errors" if self is ValidationPolicy.COLLECT_ALL else "abort on first error"
