"""Configuration package.

Usage:
    from collectionops.config import get_settings

    settings = get_settings()
    if settings.debug_mode:
        ...
"""

from .settings import (
    CollectionOpsSettings,
    DevelopmentSettings,
    ProductionSettings,
    TestSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "CollectionOpsSettings",
    "DevelopmentSettings",
    "ProductionSettings",
    "TestSettings",
    "get_settings",
    "reset_settings",
]
