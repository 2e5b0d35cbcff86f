"""Severity levels for emitted diagnostics."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Enumerate the diagnostic severities understood by editor clients."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFORMATION = "INFORMATION"
    HINT = "HINT"

    @property
    def protocol_value(self) -> int:
        """Return the numeric level used on the editor diagnostics channel."""

        ordering = {
            Severity.ERROR: 1,
            Severity.WARNING: 2,
            Severity.INFORMATION: 3,
            Severity.HINT: 4,
        }
        return ordering[self]
