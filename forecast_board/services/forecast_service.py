"""Turn a forecast feed into the report shown on screen."""

import logging
from collections.abc import Callable, Sequence

from ..exceptions import ForecastError
from ..models.config import FeedConfig
from ..models.feed import ForecastFeed
from ..models.report import ForecastReport
from .extrema import aggregate
from .feed_service import FeedService
from .periods import find_day_boundary
from .wind_chill import derive_wind_chill_series

logger = logging.getLogger(__name__)

# Shown to the user for any failure; details go to the log.
FAILURE_MESSAGE = "An error occurred while fetching or processing the forecast."


def _first_day_extreme(
    values: Sequence[float | None],
    day_boundary_index: int,
    pick: Callable[[list[float]], float],
) -> float | None:
    present = [v for v in values[: day_boundary_index + 1] if v is not None]
    return pick(present) if present else None


def build_report(feed: ForecastFeed) -> ForecastReport:
    """Compute temperature and wind chill statistics for a feed.

    Raises:
        DayBoundaryUnresolved: If the feed has no 21:00 slot.
    """
    hours = feed.hours
    boundary = find_day_boundary(hours)

    temperatures = feed.temperatures
    temperature_stats = aggregate(temperatures, hours, boundary)

    wind_chills = derive_wind_chill_series(
        temperatures, feed.wind_range_mins, feed.wind_range_maxs
    )
    wind_chill_stats = aggregate(wind_chills, hours, boundary)

    return ForecastReport(
        location_name=feed.location_name,
        slots=feed.slots,
        temperature_stats=temperature_stats,
        wind_chills=tuple(wind_chills),
        wind_chill_stats=wind_chill_stats,
        min_temperature=_first_day_extreme(feed.min_temperatures, boundary, min),
        max_temperature=_first_day_extreme(feed.max_temperatures, boundary, max),
        fetched_at=feed.fetched_at,
    )


class ForecastService:
    """Fetches the feed and builds a report, reducing failures to one notice."""

    def __init__(self, feed_service: FeedService | None = None):
        self.feed_service = feed_service or FeedService()

    async def load(self, config: FeedConfig) -> ForecastReport:
        """Load the forecast report for the configured area."""
        try:
            feed = await self.feed_service.fetch_feed(config)
            report = build_report(feed)
        except ForecastError as e:
            logger.exception(
                f"Forecast unavailable for {config.location_name}: {e.message} {e.details}"
            )
            return ForecastReport(location_name=config.location_name, error=FAILURE_MESSAGE)

        logger.info(f"Loaded forecast for {report.location_name} ({len(report.slots)} slots)")
        return report
