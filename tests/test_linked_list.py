# Copyright 2025 Ilya Makarov
#
# Licensed under the Business Source License 1.1
# Change Date: 2028-11-05
# Change License: Apache License 2.0

"""
Tests for BoundedList

These tests verify:
- Insertion order and capacity enforcement
- O(1) lookup and removal
- Move to front/back
- First-registration lookup semantics
"""

import pytest

from pagesim.core.exceptions import CapacityExceededError, InvalidHandleError
from pagesim.core.linked_list import BoundedList
from pagesim.core.models import Job, Page


@pytest.fixture
def abc():
    """List holding a, b, c with one free slot"""
    lst = BoundedList(capacity=4)
    for value in ("a", "b", "c"):
        lst.append(value)
    return lst


class TestInsertion:
    """Append, prepend and relative inserts"""

    def test_append_keeps_insertion_order(self):
        lst = BoundedList(capacity=5)
        for value in [3, 1, 4, 5]:
            lst.append(value)
        assert lst.values() == [3, 1, 4, 5]
        assert lst.count == 4
        assert len(lst) == 4

    def test_prepend(self):
        lst = BoundedList(capacity=3)
        lst.append("b")
        lst.prepend("a")
        assert lst.values() == ["a", "b"]
        assert lst.first_value == "a"
        assert lst.last_value == "b"

    def test_append_to_empty_sets_both_termini(self):
        lst = BoundedList(capacity=1)
        handle = lst.append("x")
        assert lst.first == handle
        assert lst.last == handle

    def test_insert_after_interior(self, abc):
        handle = abc.find("a")
        abc.insert_after(handle, "x")
        assert abc.values() == ["a", "x", "b", "c"]
        assert abc.count == 4

    def test_insert_before_interior(self, abc):
        handle = abc.find("c")
        abc.insert_before(handle, "x")
        assert abc.values() == ["a", "b", "x", "c"]

    def test_insert_after_last_appends(self, abc):
        abc.insert_after(abc.last, "x")
        assert abc.values() == ["a", "b", "c", "x"]
        assert abc.last_value == "x"

    def test_insert_before_first_prepends(self, abc):
        abc.insert_before(abc.first, "x")
        assert abc.values() == ["x", "a", "b", "c"]
        assert abc.first_value == "x"

    def test_inserted_values_are_findable(self, abc):
        new_handle = abc.insert_after(abc.find("b"), "x")
        assert abc.find("x") == new_handle
        assert abc.value_at(new_handle) == "x"

    def test_insert_relative_to_stale_handle(self, abc):
        handle = abc.find("b")
        abc.remove(handle)
        with pytest.raises(InvalidHandleError):
            abc.insert_after(handle, "x")


class TestCapacity:
    """Capacity enforcement"""

    def test_append_when_full_raises(self):
        lst = BoundedList(capacity=2)
        lst.append(1)
        lst.append(2)
        with pytest.raises(CapacityExceededError, match="full"):
            lst.append(3)

    def test_failed_insert_leaves_list_unchanged(self):
        lst = BoundedList(capacity=2)
        lst.append(1)
        lst.append(2)
        before = (lst.values(), lst.count, lst.first, lst.last, lst.find(1), lst.find(2))

        for insert in (
            lambda: lst.append(3),
            lambda: lst.prepend(3),
            lambda: lst.insert_after(lst.first, 3),
            lambda: lst.insert_before(lst.last, 3),
        ):
            with pytest.raises(CapacityExceededError):
                insert()

        after = (lst.values(), lst.count, lst.first, lst.last, lst.find(1), lst.find(2))
        assert after == before
        assert 3 not in lst

    def test_zero_capacity(self):
        lst = BoundedList(capacity=0)
        assert lst.is_empty
        assert lst.is_full
        with pytest.raises(CapacityExceededError) as excinfo:
            lst.append("x")
        assert excinfo.value.capacity == 0

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError):
            BoundedList(capacity=-1)

    def test_slots_are_reused_after_removal(self):
        lst = BoundedList(capacity=2)
        lst.append(1)
        lst.append(2)
        lst.remove_by_value(1)
        lst.append(3)
        assert lst.values() == [2, 3]
        assert lst.is_full


class TestLookup:
    """find / contains"""

    def test_find_absent_returns_none(self, abc):
        assert abc.find("zzz") is None
        assert not abc.contains("zzz")
        assert "zzz" not in abc

    def test_contains(self, abc):
        assert abc.contains("b")
        assert "b" in abc

    def test_lookup_uses_value_equality(self):
        lst = BoundedList(capacity=2)
        lst.append(Page(Job(1, 1), 0))
        assert Page(Job(1, 1), 99) in lst
        assert Page(Job(1, 2), 0) not in lst

    def test_first_registration_wins(self):
        """An equal value inserted again does not take over the lookup entry"""
        lst = BoundedList(capacity=3)
        original = Page(Job(1, 1), 0)
        duplicate = Page(Job(1, 1), 5)
        first_handle = lst.append(original)
        second_handle = lst.append(duplicate)

        assert lst.count == 2
        assert lst.find(duplicate) == first_handle
        assert lst.value_at(lst.find(duplicate)) is original
        assert lst.value_at(second_handle) is duplicate

        # Removing by value removes the first registered node
        lst.remove_by_value(duplicate)
        assert lst.values() == [duplicate]
        assert lst.value_at(lst.first) is duplicate


class TestRemoval:
    """remove / remove_by_value / clear"""

    def test_remove_front(self, abc):
        abc.remove(abc.first)
        assert abc.values() == ["b", "c"]
        assert abc.first_value == "b"
        assert "a" not in abc

    def test_remove_back(self, abc):
        abc.remove(abc.last)
        assert abc.values() == ["a", "b"]
        assert abc.last_value == "b"

    def test_remove_interior(self, abc):
        abc.remove(abc.find("b"))
        assert abc.values() == ["a", "c"]
        assert abc.count == 2
        assert list(reversed(abc.values())) == ["c", "a"]

    def test_remove_singleton(self):
        lst = BoundedList(capacity=1)
        handle = lst.append("only")
        assert lst.remove(handle)
        assert lst.is_empty
        assert lst.first is None
        assert lst.last is None
        assert lst.first_value is None

    def test_remove_none_is_noop(self, abc):
        assert not abc.remove(None)
        assert abc.values() == ["a", "b", "c"]

    def test_remove_stale_handle_is_noop(self, abc):
        handle = abc.find("a")
        abc.remove(handle)
        assert not abc.remove(handle)
        assert abc.values() == ["b", "c"]

    def test_remove_by_value_absent_is_noop(self, abc):
        assert not abc.remove_by_value("zzz")
        assert abc.count == 3

    def test_clear(self, abc):
        abc.clear()
        assert abc.is_empty
        assert abc.values() == []
        assert abc.find("a") is None
        abc.append("z")
        assert abc.values() == ["z"]


class TestReordering:
    """move_to_front / move_to_back"""

    def test_move_to_back(self, abc):
        abc.move_to_back(abc.find("a"))
        assert abc.values() == ["b", "c", "a"]
        assert abc.last_value == "a"
        assert abc.first_value == "b"

    def test_move_interior_to_back(self, abc):
        abc.move_to_back(abc.find("b"))
        assert abc.values() == ["a", "c", "b"]

    def test_move_to_back_is_idempotent(self, abc):
        abc.move_to_back(abc.find("a"))
        once = abc.values()
        abc.move_to_back(abc.find("a"))
        assert abc.values() == once

    def test_move_to_front(self, abc):
        abc.move_to_front(abc.find("c"))
        assert abc.values() == ["c", "a", "b"]
        assert abc.last_value == "b"

    def test_move_to_front_when_already_first(self, abc):
        abc.move_to_front(abc.first)
        assert abc.values() == ["a", "b", "c"]

    def test_move_by_value(self, abc):
        assert abc.move_to_back_by_value("a")
        assert abc.move_to_front_by_value("c")
        assert abc.values() == ["c", "b", "a"]

    def test_move_by_value_absent(self, abc):
        assert not abc.move_to_back_by_value("zzz")
        assert not abc.move_to_front_by_value("zzz")
        assert abc.values() == ["a", "b", "c"]

    def test_move_keeps_lookup(self, abc):
        handle = abc.find("a")
        abc.move_to_back(handle)
        assert abc.find("a") == handle

    def test_move_invalid_handle(self, abc):
        with pytest.raises(InvalidHandleError):
            abc.move_to_back(42)
