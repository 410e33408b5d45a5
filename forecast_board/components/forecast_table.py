"""Forecast table component: one column per slot, one row per series."""

from collections.abc import Mapping, Sequence

from textual.app import ComposeResult
from textual.widgets import DataTable, Label, Static

from ..models.config import DEFAULT_GLYPHS
from ..models.report import ForecastReport
from ..models.statistics import ExtremaResult

HIGHLIGHT_STYLES = {
    "min": "bold blue",
    "max": "bold red",
}

ROW_LABELS = ("Time", "Weather", "Wind chill", "Temp (°C)", "Wind (m/s)")


def glyph_for(code: str, glyphs: Mapping[str, str]) -> str:
    """Return the display glyph for a weather condition, or the condition itself."""
    return glyphs.get(code, code)


def format_value(value: float | None, placeholder: str = "---") -> str:
    """Format a reading for display, using the placeholder when missing."""
    if value is None:
        return placeholder
    return f"{value:g}"


def styled_cells(
    values: Sequence[float | None],
    stats: ExtremaResult,
    placeholder: str = "---",
) -> list[str]:
    """Render a series as markup, highlighting every minimum and maximum cell."""
    cells = []
    for index, value in enumerate(values):
        text = format_value(value, placeholder)
        style = HIGHLIGHT_STYLES.get(stats.highlight(index) or "")
        cells.append(f"[{style}]{text}[/{style}]" if style else text)
    return cells


class ForecastTable(Static):
    """Panel displaying the forecast series as a table."""

    DEFAULT_CSS = """
    ForecastTable {
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }

    ForecastTable #forecast-error {
        color: $error;
        display: none;
    }

    ForecastTable #forecast-error.visible {
        display: block;
    }

    ForecastTable DataTable {
        height: auto;
    }
    """

    def __init__(
        self, glyphs: Mapping[str, str] = DEFAULT_GLYPHS, placeholder: str = "---"
    ) -> None:
        super().__init__()
        self._glyphs = glyphs
        self._placeholder = placeholder
        self._report: ForecastReport | None = None

    def compose(self) -> ComposeResult:
        yield Static("[dim]Loading...[/dim]", id="forecast-header")
        yield Label("", id="forecast-error")
        yield DataTable(id="forecast-table", show_cursor=False, zebra_stripes=True)

    def set_error(self, error: str) -> None:
        """Display an error message in place of the table."""
        self.query_one("#forecast-header", Static).update("[bold]Forecast[/bold]")
        error_label = self.query_one("#forecast-error", Label)
        error_label.update(f"[red]{error}[/red]")
        error_label.add_class("visible")
        self.query_one("#forecast-table", DataTable).clear(columns=True)

    def update_report(self, report: ForecastReport) -> None:
        """Update the table with a new report."""
        self._report = report
        if report.error:
            self.set_error(report.error)
            return

        self.query_one("#forecast-error", Label).remove_class("visible")
        self.query_one("#forecast-header", Static).update(
            f"[bold]{report.location_name}[/bold]  "
            f"[dim]{report.fetched_at.strftime('%Y-%m-%d %H:%M')}[/dim]"
        )

        table = self.query_one("#forecast-table", DataTable)
        table.clear(columns=True)
        table.add_column("", key="label")
        for index in range(len(report.slots)):
            table.add_column(str(report.slots[index].hour), key=f"slot-{index}")

        placeholder = self._placeholder
        rows = [
            [str(slot.hour) for slot in report.slots],
            [glyph_for(slot.weather, self._glyphs) for slot in report.slots],
            styled_cells(report.wind_chills, report.wind_chill_stats, placeholder),
            styled_cells(report.temperatures, report.temperature_stats, placeholder),
            [slot.wind.display for slot in report.slots],
        ]
        for label, cells in zip(ROW_LABELS, rows):
            table.add_row(f"[bold]{label}[/bold]", *cells, key=label)
