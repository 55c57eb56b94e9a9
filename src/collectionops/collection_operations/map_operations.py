"""Ordering helpers for mappings.

Both functions return a new dict whose iteration order is the requested
order; the input mapping is left untouched.
"""

from collections.abc import Callable, Mapping
from typing import Any

from ..logging import get_logger
from .preconditions import require_not_empty
from .selectors import K, V

logger = get_logger(__name__)


def sort_map_by_key(mapping: Mapping[K, V], descending: bool) -> dict[K, V]:
    """Return a copy of ``mapping`` ordered by key.

    Raises:
        PreconditionViolationException: If mapping is None or empty
    """
    require_not_empty(mapping, "mapping")
    ordered = sorted(mapping.items(), key=lambda entry: entry[0], reverse=descending)
    logger.debug("map_sorted", by="key", size=len(ordered), descending=descending)
    return dict(ordered)


def sort_map_by_value(
    mapping: Mapping[K, V], descending: bool, value_key_selector: Callable[[V], Any]
) -> dict[K, V]:
    """Return a copy of ``mapping`` ordered by ``value_key_selector(value)``.

    Entries whose values compare equal keep their original relative order in
    both directions.

    Raises:
        PreconditionViolationException: If mapping is None or empty
    """
    require_not_empty(mapping, "mapping")
    ordered = sorted(
        mapping.items(), key=lambda entry: value_key_selector(entry[1]), reverse=descending
    )
    logger.debug("map_sorted", by="value", size=len(ordered), descending=descending)
    return dict(ordered)
