# supply_workbench/services/projection_service.py
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Dict, List, Optional

from supply_workbench.config import config
from supply_workbench.core.monthly import aggregate_monthly
from supply_workbench.core.projection import project, summarize
from supply_workbench.core.records import ProjectionParameters, Series, SeriesProjection
from supply_workbench.exceptions import CalculationError, NotFoundError, ProjectionError, ValidationError
from supply_workbench.logging_setup import get_logger, logger as log_manager
from supply_workbench.services.inventory_data_service import (
    InventoryDataService, partition_forecasts, partition_observations
)
from supply_workbench.utils.validation import validate_horizon, validate_projection_request

logger = get_logger('projection_service')

class ProjectionService:
    """Service for projecting inventory across many series."""

    def __init__(
        self,
        data_service: InventoryDataService,
        parameters: Optional[ProjectionParameters] = None,
        max_workers: Optional[int] = None
    ):
        """Initialize the projection service.

        Args:
            data_service: Source of series, observations and forecasts
            parameters: Engine parameters (from config when omitted)
            max_workers: Thread pool size for the per-series fan-out
                         (from config when omitted)

        Raises:
            ValidationError if max_workers is below 1
        """
        if max_workers is None:
            max_workers = config.batch_config['max_workers']
        if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
            raise ValidationError(
                f"max_workers must be a positive integer, got {max_workers!r}",
                details={'max_workers': max_workers}
            )

        self.data_service = data_service
        self.parameters = parameters or config.projection_parameters
        self.max_workers = max_workers

        settings = config.projection_config
        self.default_horizon_days = settings['default_horizon_days']
        self.warehouse_id = settings['default_warehouse_id']

    def _resolve_horizon(self, projection_days: Optional[int]) -> int:
        if projection_days is None:
            projection_days = self.default_horizon_days
        return validate_horizon(projection_days)

    def _project_one(
        self,
        series: Series,
        observations: Dict,
        forecasts: Dict,
        horizon_days: int,
        today: date
    ) -> SeriesProjection:
        try:
            projections = project(
                series.id,
                observations.get(series.id, []),
                forecasts.get(series.key, []),
                horizon_days=horizon_days,
                today=today,
                parameters=self.parameters
            )
        except CalculationError as e:
            raise ProjectionError(
                f"Projection failed for series {series.id}: {e.message}",
                details={'series_id': series.id}
            )

        return SeriesProjection(
            series_id=series.id,
            product_id=series.product_id,
            location_id=series.location_id,
            warehouse_id=self.warehouse_id,
            projections=projections,
            summary=summarize(projections, self.parameters)
        )

    def calculate_projections(
        self,
        product_id: Optional[str] = None,
        location_id: Optional[str] = None,
        projection_days: Optional[int] = None,
        today: Optional[date] = None
    ) -> List[SeriesProjection]:
        """Calculate inventory projections for every matching series.

        Data is fetched once in bulk, partitioned per series and projected
        concurrently. Results keep the order in which the series were
        returned.

        Args:
            product_id: Optional product filter
            location_id: Optional location filter
            projection_days: Horizon in days (config default when omitted)
            today: Day 0 of the projection (defaults to date.today())

        Returns:
            List of SeriesProjection
        """
        errors = validate_projection_request(product_id, location_id)
        if errors:
            raise ValidationError("Invalid projection request", details=errors)

        horizon_days = self._resolve_horizon(projection_days)
        today = today or date.today()

        run = log_manager.run_start_log(product_id, location_id, horizon_days, today)

        try:
            series_list = self.data_service.get_series(product_id, location_id)
            if not series_list:
                logger.info("No inventory series match the request")
                log_manager.run_end_log(run)
                return []

            observations = partition_observations(
                self.data_service.get_observations([series.id for series in series_list])
            )
            forecasts = partition_forecasts(
                self.data_service.get_forecasts(today, product_id, location_id)
            )

            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(
                    lambda series: self._project_one(series, observations, forecasts, horizon_days, today),
                    series_list
                ))
        except Exception as e:
            log_manager.run_end_log(run, error=e)
            raise

        empty = sum(1 for result in results if not result.projections)
        log_manager.run_end_log(run, series_count=len(results), empty_series=empty)

        return results

    def project_series(
        self,
        series_id: str,
        projection_days: Optional[int] = None,
        today: Optional[date] = None
    ) -> SeriesProjection:
        """Project a single series by id.

        Args:
            series_id: Series identifier
            projection_days: Horizon in days (config default when omitted)
            today: Day 0 of the projection (defaults to date.today())

        Returns:
            SeriesProjection

        Raises:
            NotFoundError if the series does not exist
        """
        horizon_days = self._resolve_horizon(projection_days)
        today = today or date.today()

        series = self.data_service.get_series_by_id(series_id)
        if series is None:
            raise NotFoundError(f"Inventory series {series_id} not found", details={'series_id': series_id})

        observations = partition_observations(self.data_service.get_observations([series.id]))
        forecasts = partition_forecasts(
            self.data_service.get_forecasts(today, series.product_id, series.location_id)
        )

        return self._project_one(series, observations, forecasts, horizon_days, today)

    def get_chart_data(
        self,
        product_id: Optional[str] = None,
        location_id: Optional[str] = None
    ) -> List[Dict]:
        """Get monthly forecast demand and projected ending inventory.

        Uses every observation of the matching series and every forecast
        point for the filters, whatever its date.

        Args:
            product_id: Optional product filter
            location_id: Optional location filter

        Returns:
            List of monthly chart points sorted by month
        """
        series_list = self.data_service.get_series(product_id, location_id)
        if not series_list:
            return []

        observations = self.data_service.get_observations([series.id for series in series_list])
        forecasts = self.data_service.get_forecasts(None, product_id, location_id)

        monthly = aggregate_monthly(observations, forecasts)
        logger.info(f"Aggregated {len(monthly)} months for {len(series_list)} series")
        return monthly
