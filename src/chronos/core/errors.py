from __future__ import annotations

from typing import Any


class ChronosError(Exception):
    """Base error."""


class InvalidDateError(ChronosError, ValueError):
    """Raised by the validated CalendarDate constructor."""


class TheoryUnavailableError(ChronosError):
    """Raised when an optional theory provider (erfa, DE422) is not installed."""


class ConvergenceError(ChronosError):
    """Raised when a bounded iteration exhausts its budget."""

    def __init__(self, message: str, outcome: Any = None):
        super().__init__(message)
        self.outcome = outcome
