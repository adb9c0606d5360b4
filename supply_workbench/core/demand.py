# supply_workbench/core/demand.py
from datetime import date
from typing import Optional, Sequence

from supply_workbench.core.records import ForecastPoint
from supply_workbench.utils.date_utils import days_between

def find_exact_forecast(forecasts: Sequence[ForecastPoint], day: date) -> Optional[ForecastPoint]:
    """Find the first forecast point posted on a date with a non-null forecast."""
    for point in forecasts:
        if point.post_date == day and point.forecast is not None:
            return point
    return None

def find_closest_forecast(forecasts: Sequence[ForecastPoint], day: date) -> Optional[ForecastPoint]:
    """Find the non-null forecast point closest in time to a date.

    Points are considered in date order; on a tie the first one encountered
    wins.

    Args:
        forecasts: Forecast points for one series
        day: Target date

    Returns:
        Closest forecast point, or None if every forecast is null
    """
    candidates = sorted(
        (point for point in forecasts if point.forecast is not None),
        key=lambda point: point.post_date
    )

    closest = None
    closest_distance = None
    for point in candidates:
        distance = days_between(point.post_date, day)
        if closest is None or distance < closest_distance:
            closest = point
            closest_distance = distance

    return closest

def get_daily_demand(forecasts: Sequence[ForecastPoint], day: date) -> float:
    """Get the base (unadjusted) daily demand for a date.

    An exact match on the post date takes precedence; otherwise the closest
    forecast point is used. No forecasts means no demand.

    Args:
        forecasts: Forecast points for one series
        day: Target date

    Returns:
        Base daily demand, never negative
    """
    if not forecasts:
        return 0.0

    point = find_exact_forecast(forecasts, day) or find_closest_forecast(forecasts, day)
    if point is None:
        return 0.0

    # Negative forecasts count as zero demand
    return max(0.0, float(point.forecast))
