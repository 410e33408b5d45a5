"""UI components for the forecast board."""

from .forecast_table import ForecastTable
from .status_bar import StatusBar
from .summary_panel import SummaryPanel

__all__ = ["ForecastTable", "StatusBar", "SummaryPanel"]
