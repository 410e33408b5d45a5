"""Wind chill ("feels like") temperature from air temperature and wind range."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

MS_TO_KMH = 3.6
_ONE_DECIMAL = Decimal("0.1")


def _round_one_decimal(value: float) -> float:
    """Round half away from zero to one decimal place."""
    return float(Decimal(repr(value)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def derive_wind_chill(temperature: float, wind_range_min: float, wind_range_max: float) -> float:
    """Compute the wind chill index for one slot.

    Uses the JAG/TI formula with wind speed in km/h, taking the midpoint of
    the reported m/s range as the wind speed.

    Args:
        temperature: Air temperature in °C.
        wind_range_min: Lower bound of the wind speed range in m/s.
        wind_range_max: Upper bound of the wind speed range in m/s.

    Returns:
        Wind chill in °C, rounded to one decimal.
    """
    wind_speed_avg = (wind_range_min + wind_range_max) / 2
    wind_speed_kmh = wind_speed_avg * MS_TO_KMH
    wind_factor = wind_speed_kmh**0.16
    chill = 13.12 + 0.6215 * temperature - 11.37 * wind_factor + 0.3965 * temperature * wind_factor
    return _round_one_decimal(chill)


def derive_wind_chill_series(
    temperatures: Sequence[float | None],
    wind_range_mins: Sequence[float],
    wind_range_maxs: Sequence[float],
) -> list[float | None]:
    """Apply :func:`derive_wind_chill` slot by slot; missing temperatures stay None."""
    return [
        None if temperature is None else derive_wind_chill(temperature, low, high)
        for temperature, low, high in zip(temperatures, wind_range_mins, wind_range_maxs)
    ]
