"""Tie-aware morning minimum / daytime maximum over a two-day series."""

from collections.abc import Callable, Sequence

from ..models.statistics import Day, ExtremaResult, Extremum, Period
from .periods import classify_day, classify_period


class _Running:
    """Running extreme and the indexes that reached it."""

    def __init__(self) -> None:
        self.value: float | None = None
        self.indexes: list[int] = []

    def offer(self, value: float, index: int, better: Callable[[float, float], bool]) -> None:
        if self.value is None or better(value, self.value):
            self.value = value
            self.indexes = [index]
        elif value == self.value:
            self.indexes.append(index)

    def freeze(self) -> Extremum:
        return Extremum(value=self.value, indexes=tuple(self.indexes))


def _less(a: float, b: float) -> bool:
    return a < b


def _greater(a: float, b: float) -> bool:
    return a > b


def aggregate(
    values: Sequence[float | None],
    hours: Sequence[int],
    day_boundary_index: int,
) -> ExtremaResult:
    """Fold a series into each day's morning minimum and daytime maximum.

    Every index tied at an extreme is kept, in the order it was seen. Night
    slots and missing values are ignored. An extreme with no qualifying sample
    is left unset (value None, no indexes).

    Args:
        values: Per-slot values, None where missing.
        hours: Hour of day of each slot, parallel to ``values``.
        day_boundary_index: Index of the last slot of day 1.
    """
    minimums = {Day.FIRST: _Running(), Day.SECOND: _Running()}
    maximums = {Day.FIRST: _Running(), Day.SECOND: _Running()}

    for index, (value, hour) in enumerate(zip(values, hours)):
        if value is None:
            continue
        period = classify_period(hour)
        day = classify_day(index, day_boundary_index)
        if period is Period.MORNING:
            minimums[day].offer(value, index, _less)
        elif period is Period.DAYTIME:
            maximums[day].offer(value, index, _greater)

    return ExtremaResult(
        day1_min=minimums[Day.FIRST].freeze(),
        day1_max=maximums[Day.FIRST].freeze(),
        day2_min=minimums[Day.SECOND].freeze(),
        day2_max=maximums[Day.SECOND].freeze(),
    )
