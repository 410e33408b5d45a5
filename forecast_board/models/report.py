"""Forecast report handed to the UI."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .feed import ForecastSlot
from .statistics import ExtremaResult


class ForecastReport(BaseModel):
    """Everything the forecast table and summary need to render."""

    model_config = ConfigDict(frozen=True)

    location_name: str
    slots: tuple[ForecastSlot, ...] = ()
    temperature_stats: ExtremaResult = ExtremaResult()
    wind_chills: tuple[float | None, ...] = ()
    wind_chill_stats: ExtremaResult = ExtremaResult()
    min_temperature: float | None = None  # day-1 forecast low
    max_temperature: float | None = None  # day-1 forecast high
    fetched_at: datetime = Field(default_factory=datetime.now)
    error: str | None = None

    @property
    def hours(self) -> list[int]:
        return [slot.hour for slot in self.slots]

    @property
    def temperatures(self) -> list[float | None]:
        return [slot.temperature for slot in self.slots]
