"""Forecast statistics models."""

from enum import Enum, IntEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict

Highlight = Literal["min", "max"]


class Period(str, Enum):
    """Coarse period of the day a slot falls in."""

    MORNING = "morning"
    DAYTIME = "daytime"
    NIGHT = "night"


class Day(IntEnum):
    """Which of the two forecast days a slot belongs to."""

    FIRST = 1
    SECOND = 2


class Extremum(BaseModel):
    """An extreme value and every slot index that attained it.

    ``value`` is None when no qualifying sample was seen; ``indexes`` is then empty.
    """

    model_config = ConfigDict(frozen=True)

    value: float | None = None
    indexes: tuple[int, ...] = ()

    @property
    def is_set(self) -> bool:
        return self.value is not None


class ExtremaResult(BaseModel):
    """Morning minimum and daytime maximum for each forecast day."""

    model_config = ConfigDict(frozen=True)

    day1_min: Extremum = Extremum()
    day1_max: Extremum = Extremum()
    day2_min: Extremum = Extremum()
    day2_max: Extremum = Extremum()

    def minimum(self, day: Day) -> Extremum:
        return self.day1_min if day == Day.FIRST else self.day2_min

    def maximum(self, day: Day) -> Extremum:
        return self.day1_max if day == Day.FIRST else self.day2_max

    def highlight(self, index: int) -> Highlight | None:
        """Return how the cell at ``index`` should be highlighted, if at all."""
        if index in self.day1_min.indexes:
            return "min"
        if index in self.day1_max.indexes:
            return "max"
        if index in self.day2_min.indexes:
            return "min"
        if index in self.day2_max.indexes:
            return "max"
        return None
