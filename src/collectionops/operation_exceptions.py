"""Collection operation exceptions.

This module contains the errors raised by the collection operations:
precondition violations on their inputs and key collisions while
building mappings.
"""

from typing import Any

from .base_exceptions import CollectionOpsException


class PreconditionViolationException(CollectionOpsException):
    """Raised when an operation input is absent, empty or otherwise unusable."""

    def __init__(self, parameter: str, reason: str, **kwargs) -> None:
        """Initialize with the offending parameter."""
        super().__init__(
            f"Precondition violated for '{parameter}': {reason}",
            error_code="PRECONDITION_VIOLATION",
            context={"parameter": parameter, "reason": reason, **kwargs},
        )
        self.parameter = parameter
        self.reason = reason


class EmptyInputException(PreconditionViolationException):
    """Raised when an extremum lookup receives no elements."""

    def __init__(self, operation: str, parameter: str = "sequence", **kwargs) -> None:
        """Initialize with the operation that had nothing to inspect."""
        super().__init__(
            parameter,
            f"{operation} requires at least one element",
            operation=operation,
            **kwargs,
        )
        self.error_code = "EMPTY_INPUT"
        self.operation = operation


class KeyCollisionException(CollectionOpsException):
    """Raised when two elements map to the same key during map construction."""

    def __init__(self, key: Any, existing: Any = None, incoming: Any = None, **kwargs) -> None:
        """Initialize with the colliding key and both values."""
        super().__init__(
            f"Duplicate key {key!r} (attempted merging values {existing!r} and {incoming!r})",
            error_code="KEY_COLLISION",
            context={"key": key, "existing": existing, "incoming": incoming, **kwargs},
        )
        self.key = key
