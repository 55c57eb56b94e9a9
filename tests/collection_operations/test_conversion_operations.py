"""Tests for map building, container conversion and de-duplication."""

from collections import deque
from operator import attrgetter, itemgetter

import numpy as np
import pytest

from collectionops.collection_operations.conversion_operations import (
    array_to_collection_of,
    distinct_by_field,
    to_array,
    to_collection_of,
    to_map,
)
from collectionops.exceptions import KeyCollisionException, PreconditionViolationException


class TestToMap:
    """Test to_map."""

    def test_unique_keys(self, users):
        """Unique keys produce one entry per element."""
        result = to_map(users, attrgetter("username"), lambda user: user)

        assert len(result) == len(users)
        assert result["user3"] is users[2]

    def test_value_selector_is_applied(self, users):
        """Values come from the value selector."""
        result = to_map(users, attrgetter("score"), attrgetter("username"))

        assert result == {120.0: "user1", 110.0: "user2", 130.0: "user3", 150.0: "user4"}

    def test_duplicate_key_raises_key_collision(self, users):
        """Duplicate keys fail instead of overwriting."""
        with pytest.raises(KeyCollisionException) as exc_info:
            to_map(users, attrgetter("dept_id"), attrgetter("username"))

        error = exc_info.value
        assert error.key == 4
        assert error.error_code == "KEY_COLLISION"
        assert error.context["existing"] == "user1"
        assert error.context["incoming"] == "user2"

    def test_empty_input_raises(self):
        """Empty input is a precondition violation."""
        with pytest.raises(PreconditionViolationException):
            to_map([], itemgetter("id"), itemgetter("id"))


class TestToCollectionOf:
    """Test to_collection_of and array_to_collection_of."""

    @pytest.mark.parametrize("factory", [list, tuple, deque])
    def test_factory_receives_all_elements(self, users, factory):
        """Any constructor taking an iterable can be used."""
        result = to_collection_of(users, factory)

        assert isinstance(result, factory)
        assert list(result) == users

    def test_result_is_a_copy(self, users):
        """The new container is independent of the input list."""
        result = to_collection_of(users, list)
        result.pop()

        assert len(users) == 4

    def test_empty_input_raises(self):
        """Empty input is a precondition violation."""
        with pytest.raises(PreconditionViolationException):
            to_collection_of([], deque)

    def test_array_from_tuple(self):
        """Plain Python sequences are accepted as arrays."""
        assert array_to_collection_of(("a", "b"), deque) == deque(["a", "b"])

    def test_array_from_numpy(self):
        """numpy arrays are converted to Python scalars."""
        result = array_to_collection_of(np.array([1, 2, 3]), list)

        assert result == [1, 2, 3]
        assert all(type(value) is int for value in result)

    def test_multidimensional_numpy_array_raises(self):
        """Only one-dimensional arrays are accepted."""
        with pytest.raises(PreconditionViolationException) as exc_info:
            array_to_collection_of(np.zeros((2, 2)), list)

        assert exc_info.value.parameter == "array"

    @pytest.mark.parametrize("array", [None, (), np.array([])])
    def test_missing_or_empty_array_raises(self, array):
        """None and empty arrays are precondition violations."""
        with pytest.raises(PreconditionViolationException):
            array_to_collection_of(array, list)


class TestToArray:
    """Test to_array."""

    def test_object_array_keeps_records(self, users):
        """Without a dtype the elements are stored unchanged."""
        result = to_array(users)

        assert result.shape == (4,)
        assert result.dtype == object
        assert result[0] is users[0]

    def test_sequences_are_not_unpacked(self):
        """Tuple records stay whole elements of a one-dimensional array."""
        result = to_array([(1, 2), (3, 4)])

        assert result.shape == (2,)
        assert result[1] == (3, 4)

    def test_numeric_dtype(self):
        """An explicit dtype converts the values."""
        result = to_array([1, 2, 3], dtype=float)

        assert result.dtype == np.float64
        assert result.tolist() == [1.0, 2.0, 3.0]

    def test_round_trip_through_array(self, users):
        """to_array output feeds array_to_collection_of."""
        assert array_to_collection_of(to_array(users), list) == users

    def test_empty_input_raises(self):
        """Empty input is a precondition violation."""
        with pytest.raises(PreconditionViolationException):
            to_array([])


class TestDistinctByField:
    """Test distinct_by_field."""

    def test_keeps_first_element_per_key(self, users):
        """One user per count value, the first one seen."""
        result = distinct_by_field(users, attrgetter("count"))

        assert [user.username for user in result] == ["user1", "user3"]

    def test_order_follows_first_occurrence(self):
        """Kept elements appear in the order their key first appeared."""
        records = [("b", 1), ("a", 2), ("b", 3), ("c", 4), ("a", 5)]

        result = distinct_by_field(records, itemgetter(0))

        assert result == [("b", 1), ("a", 2), ("c", 4)]

    def test_unique_keys_keep_everything(self, users):
        """Nothing is dropped when every key is distinct."""
        assert distinct_by_field(users, attrgetter("username")) == users

    def test_input_is_not_modified(self, users):
        """De-duplication returns a new list."""
        before = list(users)

        distinct_by_field(users, attrgetter("dept_id"))

        assert users == before

    def test_empty_input_raises(self):
        """Empty input is a precondition violation."""
        with pytest.raises(PreconditionViolationException):
            distinct_by_field([], itemgetter(0))
