"""CollectionOps facade.

Groups every collection operation under one class of static methods so
callers can write ``CollectionOps.group_by(...)`` without importing the
individual operation modules.

Example:
    >>> from operator import itemgetter
    >>> rows = [{"id": 1, "score": 10}, {"id": 2, "score": 30}, {"id": 2, "score": 20}]
    >>> CollectionOps.group_and_aggregate(rows, itemgetter("id"), "SUM", itemgetter("score"))
    {1: 10.0, 2: 50.0}
"""

from . import (
    aggregate_operations,
    conversion_operations,
    extremum_operations,
    grouping_operations,
    map_operations,
    sort_operations,
)


class CollectionOps:
    """Facade for sort, extremum, aggregate, grouping, conversion and map operations.

    Every method is a ``staticmethod`` delegating to the module function of
    the same name; see those functions for argument details.
    """

    # Sorting
    sort_by = staticmethod(sort_operations.sort_by)
    sort_by_weighted_sum = staticmethod(sort_operations.sort_by_weighted_sum)

    # Extremum lookup
    find_max = staticmethod(extremum_operations.find_max)
    find_min = staticmethod(extremum_operations.find_min)

    # Aggregation
    merge_reduce = staticmethod(aggregate_operations.merge_reduce)
    summary_statistics = staticmethod(aggregate_operations.summary_statistics)

    # Grouping
    group_by = staticmethod(grouping_operations.group_by)
    group_by_projected = staticmethod(grouping_operations.group_by_projected)
    group_and_aggregate = staticmethod(grouping_operations.group_and_aggregate)
    group_and_count = staticmethod(grouping_operations.group_and_count)
    group_and_reduce = staticmethod(grouping_operations.group_and_reduce)

    # Conversion and de-duplication
    to_map = staticmethod(conversion_operations.to_map)
    to_collection_of = staticmethod(conversion_operations.to_collection_of)
    array_to_collection_of = staticmethod(conversion_operations.array_to_collection_of)
    to_array = staticmethod(conversion_operations.to_array)
    distinct_by_field = staticmethod(conversion_operations.distinct_by_field)

    # Map ordering
    sort_map_by_key = staticmethod(map_operations.sort_map_by_key)
    sort_map_by_value = staticmethod(map_operations.sort_map_by_value)
