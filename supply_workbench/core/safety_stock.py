# supply_workbench/core/safety_stock.py
import math
import logging
from typing import Optional, Sequence

import numpy as np

from supply_workbench.core.records import ForecastPoint, ProjectionParameters
from supply_workbench.exceptions import CalculationError

logger = logging.getLogger(__name__)

def forecast_values(forecasts: Sequence[ForecastPoint]) -> np.ndarray:
    """Extract forecast quantities, treating nulls as zero."""
    return np.array(
        [point.forecast if point.forecast is not None else 0.0 for point in forecasts],
        dtype=float
    )

def calculate_demand_std_dev(forecasts: Sequence[ForecastPoint]) -> float:
    """Calculate the population standard deviation of forecast demand.

    Uses the raw forecast values: negative forecasts are kept here even
    though the daily demand lookup counts them as zero.

    Args:
        forecasts: Forecast points for one series

    Returns:
        Standard deviation (0.0 when there are no forecasts)
    """
    if not forecasts:
        return 0.0

    # ddof=0: population standard deviation
    return float(np.std(forecast_values(forecasts)))

def calculate_safety_stock(
    forecasts: Sequence[ForecastPoint],
    parameters: Optional[ProjectionParameters] = None
) -> float:
    """Calculate safety stock units from forecast demand variability.

    SS = max(floor, Z * σD * √(LT / 7)), where σD is the population standard
    deviation of the forecast values and LT the lead time in days. With no
    forecasts the floor is returned.

    Args:
        forecasts: Forecast points for one series
        parameters: Engine parameters (defaults: Z=1.65, LT=14, floor=10)

    Returns:
        Safety stock in units
    """
    parameters = parameters or ProjectionParameters()

    if not forecasts:
        return float(parameters.min_safety_stock)

    try:
        std_dev = calculate_demand_std_dev(forecasts)
        safety_stock = parameters.z_score * std_dev * math.sqrt(parameters.lead_time_days / 7)
    except (TypeError, ValueError) as e:
        raise CalculationError(f"Error calculating safety stock: {str(e)}")

    logger.debug(
        f"Safety stock: z={parameters.z_score}, std_dev={std_dev:.4f}, "
        f"lead_time={parameters.lead_time_days} -> {safety_stock:.4f}"
    )

    return float(max(safety_stock, parameters.min_safety_stock))

def calculate_reorder_point(
    safety_stock: float,
    parameters: Optional[ProjectionParameters] = None
) -> float:
    """Calculate the reorder point from the safety stock.

    Args:
        safety_stock: Safety stock in units
        parameters: Engine parameters (default factor 1.5)

    Returns:
        Reorder point in units
    """
    parameters = parameters or ProjectionParameters()
    return safety_stock * parameters.reorder_point_factor
