# supply_workbench/core/projection.py
"""Day-by-day inventory projection for a single series.

Both entry points are pure: every input, including the reference date, is
passed in, and nothing is cached between calls. Callers that project many
series may run `project` for each of them concurrently.
"""
import logging
from datetime import date
from typing import List, Optional, Sequence

from supply_workbench.core.demand import get_daily_demand
from supply_workbench.core.records import (
    ForecastPoint, InventoryObservation, ProjectionDay, ProjectionParameters, ProjectionSummary
)
from supply_workbench.core.safety_stock import calculate_reorder_point, calculate_safety_stock
from supply_workbench.core.seasonality import apply_seasonality
from supply_workbench.models import InventoryStatus, RiskLevel
from supply_workbench.utils.date_utils import get_horizon_dates

logger = logging.getLogger(__name__)

DEFAULT_HORIZON_DAYS = 90

def calculate_baseline_inventory(observations: Sequence[InventoryObservation]) -> float:
    """Sum every observation value for a series, treating nulls as zero.

    Note that this is the sum over all loaded periods, not the most recent
    balance.
    """
    return float(sum(obs.value or 0.0 for obs in observations))

def determine_inventory_status(
    projected_inventory: float,
    safety_stock: float,
    parameters: Optional[ProjectionParameters] = None
) -> InventoryStatus:
    """Classify projected inventory against the safety stock.

    Args:
        projected_inventory: Projected on-hand quantity (may be negative)
        safety_stock: Safety stock in units
        parameters: Engine parameters (critical ratio 0.5 by default)

    Returns:
        InventoryStatus
    """
    parameters = parameters or ProjectionParameters()

    if projected_inventory <= 0:
        return InventoryStatus.STOCKOUT
    if projected_inventory <= safety_stock * parameters.critical_ratio:
        return InventoryStatus.CRITICAL
    if projected_inventory <= safety_stock:
        return InventoryStatus.WARNING
    return InventoryStatus.OPTIMAL

def simulate_replenishment(
    projected_inventory: float,
    baseline_inventory: float,
    reorder_point: float,
    parameters: Optional[ProjectionParameters] = None
) -> float:
    """Restock instantly to estimated capacity once the reorder point is hit.

    Capacity is estimated as the baseline inventory times the capacity factor.
    Lead time is ignored: the restock lands on the same day.

    Args:
        projected_inventory: Projected on-hand quantity before restocking
        baseline_inventory: Starting inventory of the projection
        reorder_point: Reorder point in units
        parameters: Engine parameters (capacity factor 2.0 by default)

    Returns:
        Projected on-hand quantity after any restock
    """
    parameters = parameters or ProjectionParameters()

    if projected_inventory > reorder_point:
        return projected_inventory

    max_capacity = baseline_inventory * parameters.capacity_factor
    replenishment_qty = max_capacity - projected_inventory
    if replenishment_qty > 0:
        projected_inventory += replenishment_qty

    return projected_inventory

def project(
    series_id: str,
    observations: Sequence[InventoryObservation],
    forecasts: Sequence[ForecastPoint],
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    today: Optional[date] = None,
    parameters: Optional[ProjectionParameters] = None
) -> List[ProjectionDay]:
    """Project inventory for one series from today through the horizon.

    Demand for each day comes from the forecast points (exact date match,
    else closest date), scaled by the monthly seasonal factor, and is
    accumulated against the baseline inventory. From day 1 on, a day at or
    below the reorder point is restocked to estimated capacity before its
    status is classified.

    Args:
        series_id: Series identifier (used for logging only)
        observations: Inventory observations for the series
        forecasts: Forecast points for the series' product and location,
                   dated today or later
        horizon_days: Number of days after today to project (>= 0)
        today: Day 0 of the projection (defaults to date.today())
        parameters: Engine parameters

    Returns:
        List of horizon_days + 1 ProjectionDay records, or an empty list if
        the series has no observations
    """
    if not observations:
        logger.warning(f"No inventory observations for series {series_id}; skipping projection")
        return []

    parameters = parameters or ProjectionParameters()
    today = today or date.today()

    baseline_inventory = calculate_baseline_inventory(observations)
    safety_stock = calculate_safety_stock(forecasts, parameters)
    reorder_point = calculate_reorder_point(safety_stock, parameters)

    logger.debug(
        f"Series {series_id}: baseline={baseline_inventory}, safety_stock={safety_stock:.2f}, "
        f"reorder_point={reorder_point:.2f}, forecasts={len(forecasts)}"
    )

    projections = []
    cumulative_demand = 0.0

    for day, current_date in enumerate(get_horizon_dates(today, horizon_days)):
        adjusted_demand = apply_seasonality(get_daily_demand(forecasts, current_date), current_date)
        cumulative_demand += adjusted_demand

        projected_inventory = baseline_inventory - cumulative_demand

        if day > 0:
            restocked = simulate_replenishment(
                projected_inventory, baseline_inventory, reorder_point, parameters
            )
            if restocked != projected_inventory:
                logger.debug(
                    f"Series {series_id}: replenished on {current_date} "
                    f"from {projected_inventory:.2f} to {restocked:.2f}"
                )
            projected_inventory = restocked

        status = determine_inventory_status(projected_inventory, safety_stock, parameters)

        projections.append(ProjectionDay(
            date=current_date,
            projected_inventory=max(0.0, projected_inventory),
            forecast_demand=adjusted_demand,
            current_stock=baseline_inventory,
            cumulative_demand=cumulative_demand,
            reorder_point=reorder_point,
            safety_stock=safety_stock,
            status=status
        ))

    return projections

def summarize(
    projections: Sequence[ProjectionDay],
    parameters: Optional[ProjectionParameters] = None
) -> Optional[ProjectionSummary]:
    """Summarize a projection in one pass.

    Risk is high with any stockout day, medium with more than
    `medium_risk_critical_days` critical days, else low.

    Args:
        projections: Output of `project`
        parameters: Engine parameters

    Returns:
        ProjectionSummary, or None for an empty projection
    """
    if not projections:
        return None

    parameters = parameters or ProjectionParameters()

    counts = {status: 0 for status in InventoryStatus}
    min_inventory = projections[0].projected_inventory
    for day in projections:
        counts[day.status] += 1
        min_inventory = min(min_inventory, day.projected_inventory)

    stockout_days = counts[InventoryStatus.STOCKOUT]
    critical_days = counts[InventoryStatus.CRITICAL]

    if stockout_days > 0:
        risk_level = RiskLevel.HIGH
    elif critical_days > parameters.medium_risk_critical_days:
        risk_level = RiskLevel.MEDIUM
    else:
        risk_level = RiskLevel.LOW

    return ProjectionSummary(
        stockout_days=stockout_days,
        critical_days=critical_days,
        warning_days=counts[InventoryStatus.WARNING],
        min_inventory=min_inventory,
        total_demand=projections[-1].cumulative_demand,
        risk_level=risk_level
    )
