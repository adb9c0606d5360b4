from typing import Dict, Optional

from supply_workbench.exceptions import InvalidHorizonError, ValidationError

def validate_horizon(horizon_days) -> int:
    """Validate a projection horizon.

    Args:
        horizon_days: Requested number of days to project

    Returns:
        The horizon as an int

    Raises:
        InvalidHorizonError if the horizon is not a non-negative integer
    """
    if isinstance(horizon_days, bool) or not isinstance(horizon_days, int):
        raise InvalidHorizonError(
            f"Projection horizon must be an integer, got {horizon_days!r}",
            details={'horizon_days': horizon_days}
        )

    if horizon_days < 0:
        raise InvalidHorizonError(
            f"Projection horizon must be >= 0, got {horizon_days}",
            details={'horizon_days': horizon_days}
        )

    return horizon_days

def validate_projection_request(
    product_id: Optional[str] = None,
    location_id: Optional[str] = None,
    projection_days: Optional[int] = None
) -> Dict[str, str]:
    """Validate the filters of a projection request.

    Args:
        product_id: Optional product filter
        location_id: Optional location filter
        projection_days: Optional horizon

    Returns:
        Dictionary with validation errors (empty when valid)
    """
    errors = {}

    if product_id is not None and not str(product_id).strip():
        errors['product_id'] = 'Product ID must not be blank'

    if location_id is not None and not str(location_id).strip():
        errors['location_id'] = 'Location ID must not be blank'

    if projection_days is not None:
        try:
            validate_horizon(projection_days)
        except ValidationError as e:
            errors['projection_days'] = e.message

    return errors
