"""Classify forecast slots by period of day and by forecast day."""

from collections.abc import Sequence

from ..exceptions import DayBoundaryUnresolved
from ..models.statistics import Day, Period

# Hour of the slot that closes the first forecast day.
DAY_BOUNDARY_HOUR = 21


def classify_period(hour: int) -> Period:
    """Map an hour of day to its period: morning is [0, 9], daytime (9, 18]."""
    if 0 <= hour <= 9:
        return Period.MORNING
    if 9 < hour <= 18:
        return Period.DAYTIME
    return Period.NIGHT


def classify_day(index: int, day_boundary_index: int) -> Day:
    """Return the forecast day of the slot at ``index``."""
    return Day.FIRST if index <= day_boundary_index else Day.SECOND


def find_day_boundary(hours: Sequence[int]) -> int:
    """Return the index of the last slot of day 1 (the first 21:00 slot).

    Raises:
        DayBoundaryUnresolved: If no slot falls on hour 21.
    """
    for index, hour in enumerate(hours):
        if hour == DAY_BOUNDARY_HOUR:
            return index
    raise DayBoundaryUnresolved(list(hours))
