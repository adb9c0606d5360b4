"""
Plain records exchanged with the projection engine.

Inputs (InventoryObservation, ForecastPoint) are immutable snapshots of rows
supplied by the data-access layer. Outputs (ProjectionDay, ProjectionSummary)
are computed fresh for every request and expose to_dict() for presentation
layers, with dates rendered as YYYY-MM-DD.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from supply_workbench.models import InventoryStatus, RiskLevel
from supply_workbench.utils.date_utils import convert_to_date, to_iso_date


def _as_optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    return float(value)


@dataclass(frozen=True)
class InventoryObservation:
    """A recorded on-hand quantity for one series at one period date."""

    series_id: str
    period_date: date
    value: Optional[float] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "InventoryObservation":
        """Build an observation from an `inventory_series_data` row."""
        return cls(
            series_id=str(row['series_id']),
            period_date=convert_to_date(row['period_date']),
            value=_as_optional_float(row.get('value')),
        )


@dataclass(frozen=True)
class ForecastPoint:
    """A forecasted demand value for a product and location on a date.

    `actual` is carried through from the forecast view but is not read by
    the engine.
    """

    product_id: str
    location_id: str
    post_date: date
    forecast: Optional[float] = None
    actual: Optional[float] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "ForecastPoint":
        """Build a forecast point from a `forecast_with_fitted_history` row."""
        return cls(
            product_id=str(row['product_id']),
            location_id=str(row['location_id']),
            post_date=convert_to_date(row['postdate']),
            forecast=_as_optional_float(row.get('forecast')),
            actual=_as_optional_float(row.get('actual')),
        )


@dataclass(frozen=True)
class Series:
    """A (product, location) inventory time line."""

    id: str
    product_id: str
    location_id: str

    @property
    def key(self):
        return (self.product_id, self.location_id)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Series":
        return cls(
            id=str(row['id']),
            product_id=str(row['product_id']),
            location_id=str(row['location_id']),
        )


@dataclass(frozen=True)
class ProjectionParameters:
    """Tunable constants of the projection engine.

    The defaults reproduce the fixed-constant behaviour: a 14 day lead time,
    Z = 1.65 and a 10 unit safety stock floor.
    """

    lead_time_days: float = 14.0
    z_score: float = 1.65
    min_safety_stock: float = 10.0
    reorder_point_factor: float = 1.5
    capacity_factor: float = 2.0
    critical_ratio: float = 0.5
    medium_risk_critical_days: int = 7


@dataclass(frozen=True)
class ProjectionDay:
    """One day of an inventory projection."""

    date: date
    projected_inventory: float
    forecast_demand: float
    current_stock: float
    cumulative_demand: float
    reorder_point: float
    safety_stock: float
    status: InventoryStatus

    def to_dict(self) -> Dict[str, Any]:
        return {
            'date': to_iso_date(self.date),
            'projected_inventory': self.projected_inventory,
            'forecast_demand': self.forecast_demand,
            'current_stock': self.current_stock,
            'cumulative_demand': self.cumulative_demand,
            'reorder_point': self.reorder_point,
            'safety_stock': self.safety_stock,
            'status': self.status.value,
        }


@dataclass(frozen=True)
class ProjectionSummary:
    """Status tallies and risk level of a projection."""

    stockout_days: int
    critical_days: int
    warning_days: int
    min_inventory: float
    total_demand: float
    risk_level: RiskLevel

    def to_dict(self) -> Dict[str, Any]:
        return {
            'stockout_days': self.stockout_days,
            'critical_days': self.critical_days,
            'warning_days': self.warning_days,
            'min_inventory': self.min_inventory,
            'total_demand': self.total_demand,
            'risk_level': self.risk_level.value,
        }


@dataclass(frozen=True)
class SeriesProjection:
    """Projection result for one series as returned by the projection service."""

    series_id: str
    product_id: str
    location_id: str
    warehouse_id: int
    projections: List[ProjectionDay] = field(default_factory=list)
    summary: Optional[ProjectionSummary] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'series_id': self.series_id,
            'product_id': self.product_id,
            'location_id': self.location_id,
            'warehouse_id': self.warehouse_id,
            'projections': [day.to_dict() for day in self.projections],
            'summary': self.summary.to_dict() if self.summary else None,
        }
