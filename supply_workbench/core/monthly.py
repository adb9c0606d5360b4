# supply_workbench/core/monthly.py
from typing import Dict, List, Sequence

import pandas as pd

from supply_workbench.core.records import ForecastPoint, InventoryObservation
from supply_workbench.utils.date_utils import to_month_key

def _sum_by_month(rows: List[Dict], value_name: str) -> pd.Series:
    if not rows:
        return pd.Series(dtype=float, name=value_name)

    frame = pd.DataFrame(rows)
    frame[value_name] = pd.to_numeric(frame[value_name], errors='coerce').fillna(0.0)
    return frame.groupby('month')[value_name].sum()

def aggregate_monthly(
    observations: Sequence[InventoryObservation],
    forecasts: Sequence[ForecastPoint]
) -> List[Dict]:
    """Aggregate inventory and forecast demand into monthly chart points.

    Inventory values are summed per period month, forecast values per post
    month, and the projected ending inventory of a month is the difference.
    A month missing on either side counts that side as zero.

    Args:
        observations: Inventory observations (any number of series)
        forecasts: Forecast points (any dates)

    Returns:
        List of dictionaries with projection_month (YYYY-MM),
        forecasted_demand and projected_ending_inventory, sorted by month
    """
    inventory_by_month = _sum_by_month(
        [{'month': to_month_key(obs.period_date), 'inventory': obs.value} for obs in observations],
        'inventory'
    )
    demand_by_month = _sum_by_month(
        [{'month': to_month_key(point.post_date), 'forecast': point.forecast} for point in forecasts],
        'forecast'
    )

    monthly = pd.DataFrame({
        'inventory': inventory_by_month,
        'forecast': demand_by_month
    }).fillna(0.0).sort_index()
    if monthly.empty:
        return []

    monthly['projected_ending_inventory'] = monthly['inventory'] - monthly['forecast']

    return [
        {
            'projection_month': month,
            'forecasted_demand': float(row['forecast']),
            'projected_ending_inventory': float(row['projected_ending_inventory'])
        }
        for month, row in monthly.iterrows()
    ]
