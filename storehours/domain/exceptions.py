"""
Domain-specific exception hierarchy for the storehours application.
"""


class StoreHoursError(Exception):
    """Base class for all application-level errors."""


class ConfigurationError(StoreHoursError, ValueError):
    """Raised when the store configuration cannot be loaded or validated."""
