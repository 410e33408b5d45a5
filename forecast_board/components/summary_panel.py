"""Summary panel with today's forecast low/high and wind chill range."""

from textual.app import ComposeResult
from textual.widgets import Static

from ..models.report import ForecastReport
from .forecast_table import format_value


def summary_lines(report: ForecastReport, placeholder: str = "---") -> list[str]:
    """Build the summary markup for the first forecast day."""
    chill = report.wind_chill_stats
    return [
        f"Low  [blue]{format_value(report.min_temperature, placeholder)}°C[/blue]   "
        f"High [red]{format_value(report.max_temperature, placeholder)}°C[/red]",
        f"Feels like  [blue]{format_value(chill.day1_min.value, placeholder)}°C[/blue]"
        f" ~ [red]{format_value(chill.day1_max.value, placeholder)}°C[/red]",
    ]


class SummaryPanel(Static):
    """Panel showing day-1 temperature and wind chill extremes."""

    DEFAULT_CSS = """
    SummaryPanel {
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }
    """

    def __init__(self, placeholder: str = "---") -> None:
        super().__init__()
        self._placeholder = placeholder

    def compose(self) -> ComposeResult:
        yield Static("[bold]Today[/bold]", id="summary-header")
        yield Static("", id="summary-body")

    def update_report(self, report: ForecastReport) -> None:
        """Update the summary from a report."""
        body = self.query_one("#summary-body", Static)
        if report.error:
            body.update("")
            return
        body.update("\n".join(summary_lines(report, self._placeholder)))

    def clear(self) -> None:
        """Clear all data."""
        self.query_one("#summary-body", Static).update("")
