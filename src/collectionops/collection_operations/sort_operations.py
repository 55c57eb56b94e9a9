"""Sort operations for collections.

Both entry points sort the caller's list in place and return ``None``,
like ``list.sort``. Both orderings are stable, so elements with equal keys
keep their relative input order on the ascending pass.
"""

import numpy as np

from ..logging import get_logger
from .aggregate_operations import selector_totals
from .preconditions import require_not_empty, require_selectors
from .selectors import KeySelector, NumericSelector, T

logger = get_logger(__name__)


def sort_by(sequence: list[T], descending: bool, key_selector: KeySelector[T]) -> None:
    """Sort ``sequence`` in place by the value produced by ``key_selector``.

    Descending order is an ascending stable sort followed by a full
    reversal, so tied elements end up in the reverse of their ascending
    order rather than in input order.

    Args:
        sequence: List to sort
        descending: Reverse the ascending result when True
        key_selector: Record -> comparable value

    Raises:
        PreconditionViolationException: If sequence is None or empty

    Example:
        >>> scores = [{"name": "a", "score": 2}, {"name": "b", "score": 1}]
        >>> sort_by(scores, False, lambda r: r["score"])
        >>> [r["name"] for r in scores]
        ['b', 'a']
    """
    require_not_empty(sequence)
    sort_list(sequence, descending, key_selector)


def sort_list(sequence: list[T], descending: bool, key_selector: KeySelector[T]) -> None:
    sequence.sort(key=key_selector)
    if descending:
        sequence.reverse()
    logger.debug("sort_completed", size=len(sequence), descending=descending)


def sort_by_weighted_sum(
    sequence: list[T], descending: bool, *key_selectors: NumericSelector[T]
) -> None:
    """Sort ``sequence`` in place by the sum of several numeric fields.

    Each element is keyed by ``float(s1(e)) + float(s2(e)) + ...``. Descending
    order negates that sum instead of reversing the list, so tied elements
    keep their input order in both directions.

    Args:
        sequence: List to sort
        descending: Sort from the largest sum to the smallest
        *key_selectors: One or more record -> number selectors

    Raises:
        PreconditionViolationException: If sequence is None or empty, or no
            selector is given
    """
    require_not_empty(sequence)
    require_selectors(key_selectors, "key_selectors")

    totals = selector_totals(sequence, key_selectors)
    if descending:
        totals = -totals
    sequence[:] = [sequence[index] for index in np.argsort(totals, kind="stable")]
    logger.debug(
        "weighted_sort_completed",
        size=len(sequence),
        descending=descending,
        selector_count=len(key_selectors),
    )
