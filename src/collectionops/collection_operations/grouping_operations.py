"""Grouping operations for collections.

Groupings are plain dicts. Keys appear in the order they were first
encountered and each group keeps the relative order of its elements in the
(possibly pre-sorted) input.
"""

from collections import Counter
from typing import Any

import numpy as np

from ..logging import get_logger
from ..operation_exceptions import PreconditionViolationException
from .aggregate_operations import reduce_totals, selector_totals
from .constants import MergingOperation
from .preconditions import require_not_empty, require_selectors
from .selectors import Classifier, Finisher, K, KeySelector, NumericSelector, Projector, R, T, U
from .sort_operations import sort_list

logger = get_logger(__name__)


def group_by(
    sequence: list[T],
    classifier: Classifier[T, K],
    descending: bool | None = None,
    key_selector: KeySelector[T] | None = None,
) -> dict[K, list[T]]:
    """Partition ``sequence`` by the key ``classifier`` returns for each element.

    When ``descending`` and ``key_selector`` are supplied the input list is
    first sorted in place exactly like ``sort_by``, so every group comes out
    in that order.

    Args:
        sequence: Elements to group
        classifier: Record -> grouping key
        descending: Optional pre-sort direction
        key_selector: Optional pre-sort key

    Returns:
        Mapping from key to the elements sharing it

    Raises:
        PreconditionViolationException: If sequence is None or empty, or only
            one of descending / key_selector is given
    """
    return group_by_projected(sequence, classifier, _identity, descending, key_selector)


def group_by_projected(
    sequence: list[T],
    classifier: Classifier[T, K],
    projector: Projector[T, U],
    descending: bool | None = None,
    key_selector: KeySelector[T] | None = None,
) -> dict[K, list[U]]:
    """Group like ``group_by`` but store ``projector(element)`` in each group.

    Example:
        >>> rows = [{"dept": 1, "score": 9}, {"dept": 2, "score": 7}, {"dept": 1, "score": 5}]
        >>> group_by_projected(rows, lambda r: r["dept"], lambda r: r["score"])
        {1: [9, 5], 2: [7]}
    """
    require_not_empty(sequence)
    _presort(sequence, descending, key_selector)

    groups: dict[K, list[U]] = {}
    for item in sequence:
        groups.setdefault(classifier(item), []).append(projector(item))

    logger.debug("grouping_built", size=len(sequence), group_count=len(groups))
    return groups


def group_and_aggregate(
    sequence: list[T],
    classifier: Classifier[T, K],
    operation: MergingOperation | str,
    *numeric_selectors: NumericSelector[T],
) -> dict[K, float]:
    """Group, then total or average the selected numeric fields per group.

    Each element contributes the sum of all ``numeric_selectors``; SUM adds
    those contributions per group and AVERAGE divides by the group size.

    Raises:
        PreconditionViolationException: If sequence is None or empty, or no
            selector is given
        ValueError: If operation is not a known MergingOperation
    """
    require_not_empty(sequence)
    require_selectors(numeric_selectors)
    operation = MergingOperation(operation)

    totals = selector_totals(sequence, numeric_selectors)
    positions: dict[K, list[int]] = {}
    for index, item in enumerate(sequence):
        positions.setdefault(classifier(item), []).append(index)

    result = {
        key: reduce_totals(totals[np.asarray(indices)], operation)
        for key, indices in positions.items()
    }
    logger.debug(
        "grouped_aggregate_built",
        size=len(sequence),
        group_count=len(result),
        operation=operation.value,
    )
    return result


def group_and_count(sequence: list[T], classifier: Classifier[T, K]) -> dict[K, int]:
    """Count the elements sharing each key."""
    require_not_empty(sequence)
    counts = Counter(classifier(item) for item in sequence)
    logger.debug("grouped_count_built", size=len(sequence), group_count=len(counts))
    return dict(counts)


def group_and_reduce(
    sequence: list[T], classifier: Classifier[T, K], finisher: Finisher[K, T, R]
) -> R:
    """Group, then hand the whole grouping to ``finisher`` and return its result."""
    return finisher(group_by(sequence, classifier))


def _identity(item: Any) -> Any:
    return item


def _presort(
    sequence: list[T], descending: bool | None, key_selector: KeySelector[T] | None
) -> None:
    if descending is None and key_selector is None:
        return
    if descending is None or key_selector is None:
        raise PreconditionViolationException(
            "key_selector" if key_selector is None else "descending",
            "descending and key_selector must be given together",
        )
    sort_list(sequence, descending, key_selector)
