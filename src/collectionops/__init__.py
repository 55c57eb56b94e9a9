"""collectionops: generic sort, group and aggregate helpers driven by selector functions."""

from .collection_operations import (
    CollectionOps,
    MergingOperation,
    SummaryStatistics,
    array_to_collection_of,
    distinct_by_field,
    find_max,
    find_min,
    group_and_aggregate,
    group_and_count,
    group_and_reduce,
    group_by,
    group_by_projected,
    merge_reduce,
    sort_by,
    sort_by_weighted_sum,
    sort_map_by_key,
    sort_map_by_value,
    summary_statistics,
    to_array,
    to_collection_of,
    to_map,
)
from .exceptions import (
    CollectionOpsException,
    ConfigurationException,
    EmptyInputException,
    KeyCollisionException,
    PreconditionViolationException,
)

__version__ = "0.1.0"

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
    "CollectionOpsException",
    "ConfigurationException",
    "PreconditionViolationException",
    "EmptyInputException",
    "KeyCollisionException",
]
