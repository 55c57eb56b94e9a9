"""Type aliases for the caller-supplied accessor functions.

Operations never inspect record shapes; every field is read through one of
these callables. ``operator.attrgetter`` and ``operator.itemgetter`` fit
all of them.
"""

from collections.abc import Callable, Hashable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
U = TypeVar("U")
R = TypeVar("R")

KeySelector = Callable[[T], Any]
"""Record -> comparable value used for ordering."""

NumericSelector = Callable[[T], float | int]
"""Record -> number used for aggregation."""

Classifier = Callable[[T], K]
"""Record -> grouping key."""

Projector = Callable[[T], U]
"""Record -> value stored in a projected grouping."""

Finisher = Callable[[Mapping[K, list[T]]], R]
"""Full grouping -> arbitrary result."""
