"""Tests for report assembly and the forecast service."""

import asyncio
import logging

import httpx
import pytest

from forecast_board.exceptions import DayBoundaryUnresolved, FeedUnavailable
from forecast_board.models.config import FeedConfig
from forecast_board.services.feed_service import FeedService, parse_feed
from forecast_board.services.forecast_service import FAILURE_MESSAGE, ForecastService, build_report
from forecast_board.services.wind_chill import derive_wind_chill_series


class StubFeedService:
    """Feed service returning a fixed feed or raising a fixed error."""

    def __init__(self, feed=None, error=None):
        self.feed = feed
        self.error = error
        self.calls = 0

    async def fetch_feed(self, config):
        self.calls += 1
        if self.error:
            raise self.error
        return self.feed


class TestBuildReport:
    """Tests for build_report."""

    def test_temperature_stats(self, sample_feed):
        """Test temperature extrema for both days."""
        stats = build_report(sample_feed).temperature_stats
        assert (stats.day1_min.value, stats.day1_min.indexes) == (5, (0,))
        assert (stats.day1_max.value, stats.day1_max.indexes) == (12, (2,))
        assert (stats.day2_min.value, stats.day2_min.indexes) == (2, (4,))
        assert (stats.day2_max.value, stats.day2_max.indexes) == (9, (6,))

    def test_wind_chill_series_and_stats(self, sample_feed):
        """Test wind chill is derived per slot and aggregated like temperature."""
        report = build_report(sample_feed)
        expected = derive_wind_chill_series(
            sample_feed.temperatures, sample_feed.wind_range_mins, sample_feed.wind_range_maxs
        )
        assert list(report.wind_chills) == expected
        assert report.wind_chills[0] == 2.5

        stats = report.wind_chill_stats
        morning_day1 = [expected[0]]
        daytime_day1 = [expected[1], expected[2]]
        assert stats.day1_min.value == min(morning_day1)
        assert stats.day1_max.value == max(daytime_day1)
        for index in stats.day2_min.indexes:
            assert expected[index] == stats.day2_min.value

    def test_first_day_forecast_low_high(self, sample_feed):
        """Test the day-1 low/high come from the feed's min/max series up to the boundary."""
        report = build_report(sample_feed)
        assert report.min_temperature == 3
        assert report.max_temperature == 13

    def test_first_day_low_high_missing(self, sample_feed_data):
        """Test the day-1 low/high are unset when the feed has none for day 1."""
        point = sample_feed_data["pointTimeSeries"]
        point["minTemperature"] = ["", "", "", "", "1", "", "", ""]
        point["maxTemperature"] = []
        report = build_report(parse_feed(sample_feed_data))
        assert report.min_temperature is None
        assert report.max_temperature is None

    def test_zero_low_is_kept(self, sample_feed_data):
        """Test a 0°C forecast low is a real value."""
        sample_feed_data["pointTimeSeries"]["minTemperature"][0] = "0"
        report = build_report(parse_feed(sample_feed_data))
        assert report.min_temperature == 0

    def test_no_boundary_raises(self, sample_feed_data):
        """Test a feed without a 21:00 slot cannot be reported."""
        times = sample_feed_data["areaTimeSeries"]["timeDefines"]
        for entry in times:
            entry["dateTime"] = entry["dateTime"].replace("T21:", "T20:")
        with pytest.raises(DayBoundaryUnresolved):
            build_report(parse_feed(sample_feed_data))

    def test_report_keeps_slots(self, sample_feed):
        """Test the report carries the slots for rendering."""
        report = build_report(sample_feed)
        assert report.hours == sample_feed.hours
        assert report.temperatures == sample_feed.temperatures
        assert report.error is None


class TestForecastService:
    """Tests for ForecastService."""

    def test_load(self, sample_feed):
        """Test a successful load returns the built report."""
        service = ForecastService(StubFeedService(feed=sample_feed))
        report = asyncio.run(service.load(FeedConfig()))
        assert report.error is None
        assert report.temperature_stats.day1_max.value == 12

    def test_feed_failure_becomes_notice(self, caplog):
        """Test fetch failures give one opaque notice and a detailed log entry."""
        error = FeedUnavailable("Could not fetch forecast feed: HTTP 503", {"error": "HTTP 503"})
        service = ForecastService(StubFeedService(error=error))

        with caplog.at_level(logging.ERROR):
            report = asyncio.run(service.load(FeedConfig(location_name="Tokyo")))

        assert report.error == FAILURE_MESSAGE
        assert report.location_name == "Tokyo"
        assert report.slots == ()
        assert "HTTP 503" in caplog.text

    def test_boundary_failure_becomes_notice(self, sample_feed_data, caplog):
        """Test an unresolved day boundary is reported the same way."""
        for entry in sample_feed_data["areaTimeSeries"]["timeDefines"]:
            entry["dateTime"] = entry["dateTime"].replace("T21:", "T18:")
        service = ForecastService(StubFeedService(feed=parse_feed(sample_feed_data)))

        with caplog.at_level(logging.ERROR):
            report = asyncio.run(service.load(FeedConfig()))

        assert report.error == FAILURE_MESSAGE
        assert "hour 21" in caplog.text

    def test_unexpected_errors_propagate(self):
        """Test errors outside the forecast taxonomy are not swallowed."""
        service = ForecastService(StubFeedService(error=RuntimeError("bug")))
        with pytest.raises(RuntimeError):
            asyncio.run(service.load(FeedConfig()))

    def test_negative_wind_range_becomes_notice(self, sample_feed_data, caplog):
        """Test a negative wind range in the response gives the opaque notice."""
        sample_feed_data["areaTimeSeries"]["wind"][2]["range"] = "-2 -4"
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=sample_feed_data))
        service = ForecastService(FeedService(timeout=1.0, max_retries=0, transport=transport))

        with caplog.at_level(logging.ERROR):
            report = asyncio.run(service.load(FeedConfig()))

        assert report.error == FAILURE_MESSAGE
        assert report.wind_chills == ()
        assert "Malformed" in caplog.text
