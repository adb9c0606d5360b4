# supply_workbench/core/seasonality.py
from datetime import date
from typing import Dict

# Fixed monthly multipliers; March is the 1.0 baseline and December the peak.
SEASONAL_FACTORS: Dict[int, float] = {
    1: 0.9,    # post-holiday low
    2: 0.95,
    3: 1.0,
    4: 1.05,
    5: 1.1,
    6: 1.15,
    7: 1.2,    # summer peak
    8: 1.15,
    9: 1.05,
    10: 1.1,
    11: 1.25,  # pre-holiday
    12: 1.3,
}

def get_seasonal_factor(day: date) -> float:
    """Get the seasonal demand multiplier for the month of a date.

    Args:
        day: Calendar date

    Returns:
        Seasonal factor (1.0 for an unknown month)
    """
    return SEASONAL_FACTORS.get(day.month, 1.0)

def apply_seasonality(base_demand: float, day: date) -> float:
    """Apply the monthly seasonal factor to a base daily demand.

    Args:
        base_demand: Unadjusted daily demand
        day: Calendar date the demand falls on

    Returns:
        Seasonally adjusted demand
    """
    return base_demand * get_seasonal_factor(day)
