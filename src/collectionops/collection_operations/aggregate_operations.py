"""Whole-sequence numeric aggregation.

``merge_reduce`` folds several numeric fields into one total or average, and
``summary_statistics`` describes the distribution of a single field.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from ..logging import get_logger
from .constants import MergingOperation
from .preconditions import require_not_empty, require_selectors
from .selectors import NumericSelector, T

logger = get_logger(__name__)


@dataclass(frozen=True)
class SummaryStatistics:
    """Count, sum, min, max and mean of a numeric field."""

    count: int
    sum: float
    min: float
    max: float
    mean: float

    @classmethod
    def from_values(cls, values: Sequence[float]) -> "SummaryStatistics":
        """Build statistics from at least one already-extracted value."""
        array = np.asarray(values, dtype=np.float64)
        total = float(array.sum())
        return cls(
            count=int(array.size),
            sum=total,
            min=float(array.min()),
            max=float(array.max()),
            mean=total / array.size,
        )


def selector_totals(sequence: Sequence[T], selectors: tuple[NumericSelector[T], ...]) -> np.ndarray:
    """Sum every selector per element.

    Returns:
        float64 array with one total per element, in sequence order
    """
    matrix = np.array(
        [[float(selector(item)) for selector in selectors] for item in sequence],
        dtype=np.float64,
    ).reshape(len(sequence), len(selectors))
    return matrix.sum(axis=1)


def reduce_totals(totals: np.ndarray, operation: MergingOperation | str) -> float:
    """Apply SUM or AVERAGE to per-element totals (one value per element)."""
    operation = MergingOperation(operation)
    total = float(totals.sum())
    if operation is MergingOperation.SUM:
        return total
    return total / totals.size


def merge_reduce(
    sequence: list[T], operation: MergingOperation | str, *numeric_selectors: NumericSelector[T]
) -> float:
    """Sum the selected fields of every element, then total or average them.

    Args:
        sequence: Elements to aggregate
        operation: MergingOperation.SUM or MergingOperation.AVERAGE
        *numeric_selectors: One or more record -> number selectors

    Returns:
        The grand total for SUM, or the total divided by the element count
        for AVERAGE

    Raises:
        PreconditionViolationException: If sequence is None or empty, or no
            selector is given
        ValueError: If operation is not a known MergingOperation

    Example:
        >>> rows = [{"a": 1, "b": 2}, {"a": 3, "b": 4}]
        >>> merge_reduce(rows, "AVERAGE", lambda r: r["a"], lambda r: r["b"])
        5.0
    """
    require_not_empty(sequence)
    require_selectors(numeric_selectors)

    totals = selector_totals(sequence, numeric_selectors)
    result = reduce_totals(totals, operation)
    logger.debug(
        "merge_reduce_completed",
        size=len(sequence),
        operation=MergingOperation(operation).value,
        selector_count=len(numeric_selectors),
    )
    return result


def summary_statistics(
    sequence: list[T], numeric_selector: NumericSelector[T]
) -> SummaryStatistics:
    """Describe the values of one numeric field.

    Raises:
        PreconditionViolationException: If sequence is None or empty
    """
    require_not_empty(sequence)
    stats = SummaryStatistics.from_values([float(numeric_selector(item)) for item in sequence])
    logger.debug("summary_statistics_computed", count=stats.count)
    return stats
