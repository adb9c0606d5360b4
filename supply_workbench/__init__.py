from .config import config
from .logging_setup import logger, get_logger
from .exceptions import (
    SupplyWorkbenchError, ConfigError, DatabaseError, ValidationError,
    InvalidHorizonError, NotFoundError, ProjectionError, CalculationError
)

__version__ = '0.1.0'

__all__ = [
    'config',
    'logger',
    'get_logger',
    'SupplyWorkbenchError',
    'ConfigError',
    'DatabaseError',
    'ValidationError',
    'InvalidHorizonError',
    'NotFoundError',
    'ProjectionError',
    'CalculationError'
]
