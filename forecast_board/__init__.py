"""Forecast Board - a terminal table of the JMA two-day point forecast."""

__version__ = "0.1.0"
