"""Collection operations module.

This module provides stateless helpers parameterized by caller-supplied
selector functions:
- sort_operations: In-place sort by one key or by a sum of numeric fields
- extremum_operations: Max / min lookup by a field
- aggregate_operations: SUM / AVERAGE reduction and summary statistics
- grouping_operations: Group-by with projection, counting and aggregation
- conversion_operations: Map building, container conversion, de-duplication
- map_operations: Ordering mappings by key or value
- CollectionOps: Facade exposing all of the above as static methods
"""

from .aggregate_operations import SummaryStatistics, merge_reduce, summary_statistics
from .collection_ops import CollectionOps
from .constants import MergingOperation
from .conversion_operations import (
    array_to_collection_of,
    distinct_by_field,
    to_array,
    to_collection_of,
    to_map,
)
from .extremum_operations import find_max, find_min
from .grouping_operations import (
    group_and_aggregate,
    group_and_count,
    group_and_reduce,
    group_by,
    group_by_projected,
)
from .map_operations import sort_map_by_key, sort_map_by_value
from .sort_operations import sort_by, sort_by_weighted_sum

__all__ = [
    "CollectionOps",
    "MergingOperation",
    "SummaryStatistics",
    "sort_by",
    "sort_by_weighted_sum",
    "find_max",
    "find_min",
    "merge_reduce",
    "summary_statistics",
    "group_by",
    "group_by_projected",
    "group_and_aggregate",
    "group_and_count",
    "group_and_reduce",
    "to_map",
    "to_collection_of",
    "array_to_collection_of",
    "to_array",
    "distinct_by_field",
    "sort_map_by_key",
    "sort_map_by_value",
]
