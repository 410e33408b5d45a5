"""Data models for the forecast board."""

from .config import Config, DisplayConfig, FeedConfig, Settings
from .feed import ForecastFeed, ForecastSlot, WindRange
from .report import ForecastReport
from .statistics import Day, ExtremaResult, Extremum, Period

__all__ = [
    "Config",
    "Day",
    "DisplayConfig",
    "ExtremaResult",
    "Extremum",
    "FeedConfig",
    "ForecastFeed",
    "ForecastReport",
    "ForecastSlot",
    "Period",
    "Settings",
    "WindRange",
]
