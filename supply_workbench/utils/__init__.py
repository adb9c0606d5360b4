from .date_utils import convert_to_date, to_iso_date, to_month_key, get_horizon_dates
from .validation import validate_horizon, validate_projection_request

__all__ = [
    'convert_to_date',
    'to_iso_date',
    'to_month_key',
    'get_horizon_dates',
    'validate_horizon',
    'validate_projection_request'
]
