"""Maximum / minimum lookup by a selected field.

When several elements share the extremal key, the first one in iteration
order is returned (the behaviour of the built-in ``max`` and ``min``).
"""

from ..logging import get_logger
from ..operation_exceptions import EmptyInputException
from .selectors import KeySelector, T

logger = get_logger(__name__)


def find_max(sequence: list[T], key_selector: KeySelector[T]) -> T:
    """Return the element with the largest key.

    Raises:
        EmptyInputException: If sequence is None or empty
    """
    return _find_extremum(sequence, key_selector, find_maximum=True)


def find_min(sequence: list[T], key_selector: KeySelector[T]) -> T:
    """Return the element with the smallest key.

    Raises:
        EmptyInputException: If sequence is None or empty
    """
    return _find_extremum(sequence, key_selector, find_maximum=False)


def _find_extremum(sequence: list[T], key_selector: KeySelector[T], find_maximum: bool) -> T:
    operation = "find_max" if find_maximum else "find_min"
    if not sequence:
        logger.debug("precondition_failed", operation=operation, reason="empty")
        raise EmptyInputException(operation)

    result = max(sequence, key=key_selector) if find_maximum else min(sequence, key=key_selector)
    logger.debug("extremum_found", operation=operation, size=len(sequence))
    return result
