"""Configuration exceptions.

This module contains exceptions for invalid settings.
"""

from .base_exceptions import CollectionOpsException


class ConfigurationException(CollectionOpsException):
    """Raised when configuration is invalid."""

    def __init__(self, config_key: str, reason: str, **kwargs) -> None:
        """Initialize with config details."""
        super().__init__(
            f"Invalid configuration for '{config_key}': {reason}",
            error_code="INVALID_CONFIG",
            context={"config_key": config_key, "reason": reason, **kwargs},
        )
