class AnalyticsError(Exception):
    """Base exception for all analytics module errors."""
    pass

class InvalidArgumentError(AnalyticsError, ValueError):
    """Raised when a report is requested with invalid inputs."""
    pass

class ExternalDataUnavailableError(AnalyticsError):
    """Raised when observed traffic records cannot be fetched."""
    pass

class ConfigurationError(AnalyticsError):
    """Raised when configuration is invalid."""
    pass
