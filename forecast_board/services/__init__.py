"""Services for fetching the forecast and computing its statistics."""

from .extrema import aggregate
from .feed_service import FeedService, parse_feed
from .forecast_service import ForecastService, build_report
from .periods import classify_day, classify_period, find_day_boundary
from .wind_chill import derive_wind_chill, derive_wind_chill_series

__all__ = [
    "FeedService",
    "ForecastService",
    "aggregate",
    "build_report",
    "classify_day",
    "classify_period",
    "derive_wind_chill",
    "derive_wind_chill_series",
    "find_day_boundary",
    "parse_feed",
]
