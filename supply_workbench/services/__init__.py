from .inventory_data_service import InventoryDataService, partition_observations, partition_forecasts
from .projection_service import ProjectionService

__all__ = [
    'InventoryDataService',
    'ProjectionService',
    'partition_observations',
    'partition_forecasts'
]
