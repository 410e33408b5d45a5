"""Main Textual application for the forecast board."""

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header

from .components import ForecastTable, StatusBar, SummaryPanel
from .models.config import Config
from .models.report import ForecastReport
from .services.feed_service import FeedService
from .services.forecast_service import ForecastService

logger = logging.getLogger(__name__)


class ForecastApp(App):
    """Terminal app showing the two-day forecast table."""

    TITLE = "Forecast Board"

    BINDINGS = [
        Binding("r", "refresh", "Refresh"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, config_path: Path | str = "config.json", config: Config | None = None):
        super().__init__()
        self.app_config = config or Config.load_or_default(config_path)
        feed_config = self.app_config.feed
        self.forecast_service = ForecastService(
            FeedService(timeout=feed_config.timeout_seconds, max_retries=feed_config.max_retries)
        )
        self.report: ForecastReport | None = None

    def compose(self) -> ComposeResult:
        display = self.app_config.display
        yield Header()
        with VerticalScroll():
            yield SummaryPanel(placeholder=display.placeholder)
            yield ForecastTable(glyphs=display.glyph_table, placeholder=display.placeholder)
        yield StatusBar()
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = self.app_config.feed.location_name
        self.action_refresh()
        interval = self.app_config.settings.refresh_interval_minutes
        if interval > 0:
            self.set_interval(interval * 60, self.action_refresh)

    def action_refresh(self) -> None:
        """Fetch the forecast in the background."""
        self.query_one(StatusBar).set_activity("Fetching forecast...")
        self.run_worker(self._load_forecast(), exclusive=True, group="forecast")

    async def _load_forecast(self) -> None:
        report = await self.forecast_service.load(self.app_config.feed)
        self.show_report(report)

    def show_report(self, report: ForecastReport) -> None:
        """Push a report to every panel."""
        self.report = report
        self.query_one(SummaryPanel).update_report(report)
        self.query_one(ForecastTable).update_report(report)

        status = self.query_one(StatusBar)
        status.clear_activity()
        if report.error:
            self.notify(report.error, severity="error")
        else:
            status.set_last_refresh(report.fetched_at)
