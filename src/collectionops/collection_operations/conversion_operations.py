"""Conversion and de-duplication helpers."""

from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

import numpy as np

from ..logging import get_logger
from ..operation_exceptions import KeyCollisionException, PreconditionViolationException
from .preconditions import require_not_empty
from .selectors import K, KeySelector, T, V

logger = get_logger(__name__)

C = TypeVar("C")


def to_map(
    sequence: list[T], key_selector: Callable[[T], K], value_selector: Callable[[T], V]
) -> dict[K, V]:
    """Build a dict from key/value selectors, refusing duplicate keys.

    Raises:
        PreconditionViolationException: If sequence is None or empty
        KeyCollisionException: If two elements produce the same key
    """
    require_not_empty(sequence)

    result: dict[K, V] = {}
    for item in sequence:
        key = key_selector(item)
        value = value_selector(item)
        if key in result:
            logger.debug("key_collision", key=repr(key))
            raise KeyCollisionException(key, existing=result[key], incoming=value)
        result[key] = value

    logger.debug("map_built", size=len(result))
    return result


def to_collection_of(sequence: Sequence[T], factory: Callable[[Iterable[T]], C]) -> C:
    """Copy ``sequence`` into the container built by ``factory``.

    ``factory`` receives an iterable of the elements, so ``list``, ``tuple``,
    ``collections.deque`` and similar constructors can be passed directly.

    Raises:
        PreconditionViolationException: If sequence is None or empty
    """
    require_not_empty(sequence)
    return factory(iter(sequence))


def array_to_collection_of(
    array: Sequence[T] | np.ndarray, factory: Callable[[Iterable[Any]], C]
) -> C:
    """Copy an array into the container built by ``factory``.

    Accepts any sequence or a one-dimensional ``numpy.ndarray``; numpy
    elements are converted to Python scalars with ``ndarray.tolist``.

    Raises:
        PreconditionViolationException: If array is None, empty or not
            one-dimensional
    """
    if isinstance(array, np.ndarray):
        if array.ndim != 1:
            raise PreconditionViolationException(
                "array", f"expected a one-dimensional array, got {array.ndim} dimensions"
            )
        require_not_empty(array, "array")
        return factory(iter(array.tolist()))

    require_not_empty(array, "array")
    return factory(iter(array))


def to_array(sequence: Sequence[T], dtype: Any = None) -> np.ndarray:
    """Materialize ``sequence`` as a one-dimensional numpy array.

    With ``dtype=None`` the result is an object array holding the elements
    unchanged (records that are themselves sequences are not unpacked).
    Otherwise the elements are converted with ``numpy.asarray``.

    Raises:
        PreconditionViolationException: If sequence is None or empty
    """
    require_not_empty(sequence)
    if dtype is None:
        result = np.empty(len(sequence), dtype=object)
        for index, item in enumerate(sequence):
            result[index] = item
        return result
    return np.asarray(list(sequence), dtype=dtype)


def distinct_by_field(sequence: list[T], key_selector: KeySelector[T]) -> list[T]:
    """Keep the first element seen for each key, in first-occurrence order.

    Raises:
        PreconditionViolationException: If sequence is None or empty
    """
    require_not_empty(sequence)

    first_seen: dict[Any, T] = {}
    for item in sequence:
        first_seen.setdefault(key_selector(item), item)

    logger.debug("distinct_completed", size=len(sequence), kept=len(first_seen))
    return list(first_seen.values())
