"""
Unit tests for create_filter_set_for_fields (metadata_filter.fields).
"""

from __future__ import annotations

import pytest

from metadata_filter.exceptions import (
    EmptyCollectionError,
    EmptyStringError,
    TypeMismatchError,
)
from metadata_filter.fields import create_filter_set_for_fields
from metadata_filter.filter import create_filter


class TestCreateFilterSetForFields:
    """Tests for create_filter_set_for_fields()."""

    # -----------------------------------------------------------------
    # Invalid arguments
    # -----------------------------------------------------------------

    def test_fields_not_a_list(self, dummy_fn):
        with pytest.raises(TypeMismatchError) as exc_info:
            create_filter_set_for_fields(None, dummy_fn)
        assert str(exc_info.value) == (
            "Invalid 'fields' argument: expected 'string[]', got 'NoneType'"
        )

    def test_empty_fields(self, dummy_fn):
        with pytest.raises(
            EmptyCollectionError,
            match="Invalid 'fields' argument: received an empty array",
        ):
            create_filter_set_for_fields([], dummy_fn)

    def test_invalid_filter_function(self):
        with pytest.raises(
            TypeMismatchError,
            match="Invalid filter function: expected 'function', got 'int'",
        ):
            create_filter_set_for_fields(["foo"], 2)

    def test_list_of_invalid_filter_functions(self):
        with pytest.raises(
            TypeMismatchError,
            match="Invalid filter function: expected 'function', got 'int'",
        ):
            create_filter_set_for_fields(["foo"], [2, 3])

    def test_invalid_field(self, dummy_fn):
        with pytest.raises(
            TypeMismatchError,
            match="Invalid field: expected 'string', got 'int'",
        ):
            create_filter_set_for_fields(["foo", 2], dummy_fn)

    def test_empty_field(self, dummy_fn):
        with pytest.raises(
            EmptyStringError,
            match="Invalid field: expected 'string', got an empty string",
        ):
            create_filter_set_for_fields(["foo", ""], dummy_fn)

    def test_fields_checked_before_functions(self):
        with pytest.raises(EmptyCollectionError, match="'fields'"):
            create_filter_set_for_fields([], 2)

    # -----------------------------------------------------------------
    # Valid arguments
    # -----------------------------------------------------------------

    def test_single_function(self, dummy_fn):
        filter_set = create_filter_set_for_fields(["foo", "bar", "baz"], dummy_fn)
        assert filter_set == {"foo": dummy_fn, "bar": dummy_fn, "baz": dummy_fn}

    def test_multiple_functions(self, dummy_fn):
        fn1, fn2 = dummy_fn, str.strip
        filter_set = create_filter_set_for_fields(["foo", "bar", "baz"], [fn1, fn2])
        assert filter_set == {
            "foo": [fn1, fn2],
            "bar": [fn1, fn2],
            "baz": [fn1, fn2],
        }

    def test_chain_object_is_shared(self, dummy_fn):
        chain = [dummy_fn, str.strip]
        filter_set = create_filter_set_for_fields(["foo", "bar"], chain)
        assert filter_set["foo"] is chain
        assert filter_set["bar"] is chain

    def test_tuple_of_fields(self, dummy_fn):
        filter_set = create_filter_set_for_fields(("foo", "bar"), dummy_fn)
        assert list(filter_set) == ["foo", "bar"]

    def test_result_accepted_by_create_filter(self):
        filter_set = create_filter_set_for_fields(["artist", "track"], [str.strip, str.upper])
        f = create_filter(filter_set)
        assert f.get_fields() == ["artist", "track"]
        assert f.filter_field("track", "  song ") == "SONG"
