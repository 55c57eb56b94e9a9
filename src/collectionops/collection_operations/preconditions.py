"""Input checks shared by every collection operation."""

from collections.abc import Sized
from typing import Any

from ..logging import get_logger
from ..operation_exceptions import PreconditionViolationException

logger = get_logger(__name__)


def require_not_empty(collection: Sized | None, parameter: str = "sequence") -> None:
    """Fail unless ``collection`` is present and holds at least one element.

    Args:
        collection: Sequence or mapping to check
        parameter: Name reported in the error

    Raises:
        PreconditionViolationException: If the collection is None or empty
    """
    if collection is None:
        logger.debug("precondition_failed", parameter=parameter, reason="missing")
        raise PreconditionViolationException(parameter, "must not be None")
    if len(collection) == 0:
        logger.debug("precondition_failed", parameter=parameter, reason="empty")
        raise PreconditionViolationException(parameter, "must contain at least one element")


def require_selectors(selectors: tuple[Any, ...], parameter: str = "numeric_selectors") -> None:
    """Fail unless at least one callable selector was supplied."""
    if not selectors:
        raise PreconditionViolationException(parameter, "at least one selector is required")
    for selector in selectors:
        if not callable(selector):
            raise PreconditionViolationException(
                parameter, f"selector {selector!r} is not callable"
            )
