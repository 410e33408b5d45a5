"""Forecast feed service using the JMA point forecast (VPFD) JSON."""

import asyncio
import logging
import random
from datetime import datetime
from typing import Any

import httpx
from pydantic import ValidationError

from ..exceptions import FeedUnavailable
from ..models.config import FeedConfig
from ..models.feed import ForecastFeed, ForecastSlot, WindRange

logger = logging.getLogger(__name__)

# Retry configuration
MAX_RETRIES = 3
INITIAL_BACKOFF = 1.0
MAX_BACKOFF = 10.0
BACKOFF_MULTIPLIER = 2.0
RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


def _calculate_backoff(attempt: int) -> float:
    """Calculate backoff time with jitter."""
    backoff = min(INITIAL_BACKOFF * (BACKOFF_MULTIPLIER**attempt), MAX_BACKOFF)
    jitter = 0.5 + random.random()
    return backoff * jitter


def _to_number(raw: Any) -> float | None:
    """Convert a feed reading to float; empty strings and nulls are missing."""
    if raw is None or raw == "":
        return None
    return float(raw)


def parse_feed(data: dict, location_name: str = "") -> ForecastFeed:
    """Parse a VPFD response into a ForecastFeed.

    The point temperature series carries one trailing sample beyond the area
    time axis; it is dropped here.

    Raises:
        FeedUnavailable: If the response is missing series or they don't line up.
    """
    try:
        area = data["areaTimeSeries"]
        point = data["pointTimeSeries"]

        times = [datetime.fromisoformat(d["dateTime"]) for d in area["timeDefines"]]
        weather = list(area["weather"])
        winds = [WindRange.parse(w["range"]) for w in area["wind"]]
        temperatures = [_to_number(t) for t in point["temperature"]][:-1]
        min_temperatures = tuple(_to_number(t) for t in point.get("minTemperature", []))
        max_temperatures = tuple(_to_number(t) for t in point.get("maxTemperature", []))

        lengths = {len(times), len(weather), len(winds), len(temperatures)}
        if len(lengths) != 1:
            raise ValueError(
                f"Series lengths differ: time={len(times)} weather={len(weather)} "
                f"wind={len(winds)} temperature={len(temperatures)}"
            )

        slots = tuple(
            ForecastSlot(time=time, temperature=temperature, wind=wind, weather=code)
            for time, temperature, wind, code in zip(times, temperatures, winds, weather)
        )
        return ForecastFeed(
            location_name=location_name or point.get("pointName", ""),
            slots=slots,
            min_temperatures=min_temperatures,
            max_temperatures=max_temperatures,
        )

    except (KeyError, TypeError, ValueError, ValidationError) as e:
        raise FeedUnavailable(f"Malformed forecast feed: {e}", {"error": repr(e)}) from e


class FeedService:
    """Service to fetch the forecast feed from the JMA API."""

    def __init__(
        self,
        timeout: float = 30.0,
        max_retries: int = MAX_RETRIES,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.max_retries = max_retries
        self._transport = transport

    async def fetch_json(self, url: str) -> dict:
        """GET a JSON document, retrying transient failures.

        Raises:
            FeedUnavailable: When the request fails for good.
        """
        last_error: str | None = None

        for attempt in range(self.max_retries + 1):
            try:
                async with httpx.AsyncClient(
                    timeout=self.timeout, transport=self._transport
                ) as client:
                    response = await client.get(url)
                    response.raise_for_status()
                    return response.json()

            except httpx.TimeoutException:
                last_error = "Request timeout"
                if attempt < self.max_retries:
                    backoff = _calculate_backoff(attempt)
                    logger.debug(f"Feed timeout, retry {attempt + 1} in {backoff:.1f}s")
                    await asyncio.sleep(backoff)
                    continue
                logger.warning(f"Timeout fetching {url} after retries")

            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                last_error = f"HTTP {status}"

                if status in RETRYABLE_STATUS_CODES and attempt < self.max_retries:
                    backoff = _calculate_backoff(attempt)
                    logger.debug(f"Feed HTTP {status}, retry {attempt + 1} in {backoff:.1f}s")
                    await asyncio.sleep(backoff)
                    continue
                logger.error(f"HTTP error fetching feed: {status}")

            except httpx.ConnectError as e:
                last_error = "Connection error"
                if attempt < self.max_retries:
                    backoff = _calculate_backoff(attempt)
                    logger.debug(f"Feed connection error, retry {attempt + 1} in {backoff:.1f}s")
                    await asyncio.sleep(backoff)
                    continue
                logger.error(f"Connection error fetching feed: {e}")

            except httpx.HTTPError as e:
                last_error = str(e) or type(e).__name__
                logger.error(f"Error fetching feed: {last_error}")

            except ValueError as e:
                # Body was not JSON
                last_error = f"Invalid JSON: {e}"
                logger.error(f"Invalid JSON from {url}: {e}")

            break

        raise FeedUnavailable(
            f"Could not fetch forecast feed: {last_error or 'Unknown error'}",
            {"url": url, "error": last_error},
        )

    async def fetch_feed(self, config: FeedConfig) -> ForecastFeed:
        """Fetch and parse the forecast for the configured area."""
        data = await self.fetch_json(config.url)
        feed = parse_feed(data, config.location_name)
        logger.debug(f"Fetched {len(feed.slots)} forecast slots for {feed.location_name}")
        return feed
