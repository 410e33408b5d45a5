"""Errors raised while acquiring a feed or computing forecast statistics."""

from typing import Any


class ForecastError(Exception):
    """Base class for forecast errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class FeedUnavailable(ForecastError):
    """Raised when the forecast feed cannot be retrieved or parsed."""


class DayBoundaryUnresolved(ForecastError):
    """Raised when the hour series has no 21:00 slot to split day 1 from day 2."""

    def __init__(self, hours: list[int]):
        super().__init__(
            "Cannot split forecast into days: no slot at hour 21",
            {"hours": list(hours)},
        )
