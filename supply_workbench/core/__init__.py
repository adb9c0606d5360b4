from .records import (
    InventoryObservation, ForecastPoint, Series, ProjectionParameters,
    ProjectionDay, ProjectionSummary, SeriesProjection
)
from .safety_stock import calculate_safety_stock, calculate_reorder_point, calculate_demand_std_dev
from .seasonality import SEASONAL_FACTORS, get_seasonal_factor, apply_seasonality
from .demand import get_daily_demand, find_exact_forecast, find_closest_forecast
from .projection import (
    project, summarize, determine_inventory_status, simulate_replenishment,
    calculate_baseline_inventory, DEFAULT_HORIZON_DAYS
)
from .monthly import aggregate_monthly

__all__ = [
    'InventoryObservation',
    'ForecastPoint',
    'Series',
    'ProjectionParameters',
    'ProjectionDay',
    'ProjectionSummary',
    'SeriesProjection',
    'calculate_safety_stock',
    'calculate_reorder_point',
    'calculate_demand_std_dev',
    'SEASONAL_FACTORS',
    'get_seasonal_factor',
    'apply_seasonality',
    'get_daily_demand',
    'find_exact_forecast',
    'find_closest_forecast',
    'project',
    'summarize',
    'determine_inventory_status',
    'simulate_replenishment',
    'calculate_baseline_inventory',
    'DEFAULT_HORIZON_DAYS',
    'aggregate_monthly'
]
