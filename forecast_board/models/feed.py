"""Forecast feed data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WindRange(BaseModel):
    """Reported wind speed range for one slot, in meters per second.

    Both bounds must be non-negative; an inverted range (max below min) is kept as reported.
    """

    model_config = ConfigDict(frozen=True)

    min: float = Field(ge=0)
    max: float = Field(ge=0)

    @classmethod
    def parse(cls, text: str) -> "WindRange":
        """Parse a space-separated "min max" range such as "2 4"."""
        parts = text.split()
        if len(parts) != 2:
            raise ValueError(f"Wind range must have two values, got '{text}'")
        return cls(min=float(parts[0]), max=float(parts[1]))

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2

    @property
    def display(self) -> str:
        """Range as shown in the table (e.g., '2-4')."""
        return f"{self.min:g}-{self.max:g}"


class ForecastSlot(BaseModel):
    """One time slot of the forecast."""

    model_config = ConfigDict(frozen=True)

    time: datetime
    temperature: float | None = None
    wind: WindRange
    weather: str = ""

    @property
    def hour(self) -> int:
        """Hour of day in the timestamp's own offset."""
        return self.time.hour


class ForecastFeed(BaseModel):
    """Parsed two-day forecast with parallel per-slot series."""

    model_config = ConfigDict(frozen=True)

    location_name: str = ""
    slots: tuple[ForecastSlot, ...] = ()
    min_temperatures: tuple[float | None, ...] = ()
    max_temperatures: tuple[float | None, ...] = ()
    fetched_at: datetime = Field(default_factory=datetime.now)

    @property
    def hours(self) -> list[int]:
        return [slot.hour for slot in self.slots]

    @property
    def temperatures(self) -> list[float | None]:
        return [slot.temperature for slot in self.slots]

    @property
    def wind_range_mins(self) -> list[float]:
        return [slot.wind.min for slot in self.slots]

    @property
    def wind_range_maxs(self) -> list[float]:
        return [slot.wind.max for slot in self.slots]

    @property
    def weather_codes(self) -> list[str]:
        return [slot.weather for slot in self.slots]
