# supply_workbench/services/inventory_data_service.py
import logging
from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from supply_workbench.core.records import ForecastPoint, InventoryObservation, Series
from supply_workbench.db.interface import DatabaseInterface

logger = logging.getLogger(__name__)

SERIES_TABLE = 'inventory_series'
SERIES_DATA_TABLE = 'inventory_series_data'
FORECAST_VIEW = 'forecast_with_fitted_history'

class InventoryDataService:
    """Read-only access to inventory series, observations and forecasts."""

    def __init__(self, interface: DatabaseInterface):
        """Initialize the data service.

        Args:
            interface: Database interface to read through
        """
        self.interface = interface

    @staticmethod
    def _build_filters(product_id: Optional[str], location_id: Optional[str]) -> Dict[str, str]:
        filters = {}
        if product_id:
            filters['product_id'] = product_id
        if location_id:
            filters['location_id'] = location_id
        return filters

    def get_series(
        self,
        product_id: Optional[str] = None,
        location_id: Optional[str] = None
    ) -> List[Series]:
        """Get inventory series, optionally filtered by product and location.

        Args:
            product_id: Optional product filter
            location_id: Optional location filter

        Returns:
            List of Series
        """
        rows = self.interface.query(
            SERIES_TABLE,
            filters=self._build_filters(product_id, location_id),
            columns=['id', 'product_id', 'location_id']
        )
        logger.debug(f"Fetched {len(rows)} inventory series")
        return [Series.from_row(row) for row in rows]

    def get_series_by_id(self, series_id: str) -> Optional[Series]:
        """Get one inventory series by id, or None if it does not exist."""
        rows = self.interface.query(
            SERIES_TABLE,
            filters={'id': series_id},
            columns=['id', 'product_id', 'location_id']
        )
        return Series.from_row(rows[0]) if rows else None

    def get_observations(self, series_ids: Sequence[str]) -> List[InventoryObservation]:
        """Get inventory observations for the given series, ordered by period date.

        Args:
            series_ids: Series identifiers

        Returns:
            List of InventoryObservation
        """
        if not series_ids:
            return []

        rows = self.interface.query(
            SERIES_DATA_TABLE,
            filters={'series_id': list(series_ids)},
            order_by='period_date'
        )
        logger.debug(f"Fetched {len(rows)} inventory observations for {len(series_ids)} series")
        return [InventoryObservation.from_row(row) for row in rows]

    def get_forecasts(
        self,
        today: Optional[date],
        product_id: Optional[str] = None,
        location_id: Optional[str] = None
    ) -> List[ForecastPoint]:
        """Get forecast points ordered by post date.

        Args:
            today: Only points dated on or after this date are returned;
                   None returns every date
            product_id: Optional product filter
            location_id: Optional location filter

        Returns:
            List of ForecastPoint
        """
        gte = {'postdate': today} if today else None

        rows = self.interface.query(
            FORECAST_VIEW,
            filters=self._build_filters(product_id, location_id),
            gte=gte,
            order_by='postdate',
            columns=['product_id', 'location_id', 'postdate', 'forecast', 'actual']
        )
        logger.debug(f"Fetched {len(rows)} forecast points")
        return [ForecastPoint.from_row(row) for row in rows]

def partition_observations(
    observations: Sequence[InventoryObservation]
) -> Dict[str, List[InventoryObservation]]:
    """Group observations by series id, preserving their order."""
    grouped = defaultdict(list)
    for obs in observations:
        grouped[obs.series_id].append(obs)
    return dict(grouped)

def partition_forecasts(
    forecasts: Sequence[ForecastPoint]
) -> Dict[Tuple[str, str], List[ForecastPoint]]:
    """Group forecast points by (product_id, location_id), preserving their order."""
    grouped = defaultdict(list)
    for point in forecasts:
        grouped[(point.product_id, point.location_id)].append(point)
    return dict(grouped)
