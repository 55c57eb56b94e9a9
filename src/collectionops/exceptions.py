"""Exception hierarchy for collectionops.

This module re-exports all exceptions from domain-specific modules
for convenience.
"""

from .base_exceptions import CollectionOpsException
from .config_exceptions import ConfigurationException
from .operation_exceptions import (
    EmptyInputException,
    KeyCollisionException,
    PreconditionViolationException,
)

__all__ = [
    "CollectionOpsException",
    "ConfigurationException",
    "PreconditionViolationException",
    "EmptyInputException",
    "KeyCollisionException",
]
