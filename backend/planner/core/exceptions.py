class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

class ConfigurationError(AppError):
    """Raised when planner settings cannot produce a usable grid or rule setup."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=500, details=details)
