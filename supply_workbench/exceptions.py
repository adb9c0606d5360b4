class SupplyWorkbenchError(Exception):
    """Base exception for Supply Workbench errors."""

    def __init__(self, message=None, code=None, details=None):
        """Initialize the exception.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
        """
        self.message = message or "An error occurred in the Supply Workbench"
        self.code = code
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        """String representation of the error."""
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message

    def to_dict(self):
        """Convert the exception to a dictionary."""
        error_dict = {
            'error': self.__class__.__name__,
            'message': self.message,
        }

        if self.code:
            error_dict['code'] = self.code

        if self.details:
            error_dict['details'] = self.details

        return error_dict


class ConfigError(SupplyWorkbenchError):
    """Exception raised for configuration errors."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Configuration error"
        super().__init__(message, code, details)


class DatabaseError(SupplyWorkbenchError):
    """Exception raised for database-related errors."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Database error"
        super().__init__(message, code, details)


class ValidationError(SupplyWorkbenchError):
    """Exception raised for data validation errors."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Validation error"
        super().__init__(message, code, details)


class InvalidHorizonError(ValidationError):
    """Exception raised when a projection horizon is negative or not an integer."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Invalid projection horizon"
        super().__init__(message, code, details)


class NotFoundError(SupplyWorkbenchError):
    """Exception raised when a requested resource is not found."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Resource not found"
        super().__init__(message, code, details)


class ProjectionError(SupplyWorkbenchError):
    """Exception raised for inventory projection errors."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Inventory projection error"
        super().__init__(message, code, details)


class CalculationError(SupplyWorkbenchError):
    """Exception raised for calculation errors."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Calculation error"
        super().__init__(message, code, details)
