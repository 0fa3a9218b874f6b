"""Unit tests for list, dict, mapping, sequence, set, queue and stack helpers."""

from collections import deque
from types import MappingProxyType
from unittest.mock import Mock

import pytest

from oxtensions.extensions.containers import dictionaries, lists, mappings, queues, sequences, sets, stacks


class TestLists:

    def test_is_null_or_empty(self):
        assert lists.is_null_or_empty(None)
        assert lists.is_null_or_empty([])
        assert lists.is_null_or_empty(iter([]))
        assert not lists.is_null_or_empty(x for x in [1])

    def test_chunk(self):
        assert list(lists.chunk([1, 2, 3, 4, 5], 2)) == [[1, 2], [3, 4], [5]]
        with pytest.raises(ValueError):
            list(lists.chunk([1], 0))

    def test_shuffle_keeps_items(self):
        items = list(range(20))
        lists.shuffle(items)
        assert sorted(items) == list(range(20))

    def test_distinct_by_keeps_first(self):
        words = ["apple", "avocado", "banana", "blueberry", "cherry"]
        assert list(lists.distinct_by(words, lambda w: w[0])) == ["apple", "banana", "cherry"]

    def test_for_each_and_to_set(self):
        action = Mock()
        lists.for_each([1, 2], action)
        assert action.call_count == 2
        assert lists.to_set([1, 1, 2]) == {1, 2}

    def test_paginate(self):
        assert list(lists.paginate(range(10), 1, 3)) == [3, 4, 5]
        assert list(lists.paginate(range(10), 3, 3)) == [9]
        with pytest.raises(ValueError):
            list(lists.paginate([], -1, 3))

    def test_in_place_mutations(self):
        items = [1, 2]
        lists.add_range_if_not_exists(items, [2, 3, 3])
        assert items == [1, 2, 3]

        removed = lists.remove_where(items, lambda v: v % 2 == 1)
        assert removed == 2
        assert items == [2]

    def test_min_and_max_by(self):
        people = [("ann", 31), ("bob", 25), ("cy", 25)]
        assert lists.min_by(people, lambda p: p[1]) == ("bob", 25)
        assert lists.max_by(people, lambda p: p[1]) == ("ann", 31)
        assert lists.min_by([], len) is None

    def test_flatten_and_interleave(self):
        assert list(lists.flatten([[1, 2], [], [3]])) == [1, 2, 3]
        assert list(lists.interleave([1, 3, 5, 7], [2, 4])) == [1, 2, 3, 4, 5, 7]

    def test_random_selection(self):
        assert lists.random_item([42]) == 42
        with pytest.raises(ValueError):
            lists.random_item([])
        picked = lists.random_items([1, 2, 3, 4], 3)
        assert len(set(picked)) == 3
        with pytest.raises(ValueError):
            lists.random_items([1], 2)

    def test_rotate_left(self):
        items = [1, 2, 3, 4, 5]
        lists.rotate(items, 2)
        assert items == [3, 4, 5, 1, 2]
        lists.rotate(items, -2)
        assert items == [1, 2, 3, 4, 5]

    def test_counting_and_duplicates(self):
        assert lists.count_by(["a", "bb", "cc"], len) == {1: 1, 2: 2}
        assert lists.none([])
        assert lists.none([1, 3], lambda v: v % 2 == 0)
        assert lists.has_duplicates([1, 2, 1])
        assert list(lists.duplicates([1, 2, 1, 3, 2, 1], lambda v: v)) == [1, 2]


class TestDictionaries:

    def test_get_helpers(self):
        data = {"a": 1}
        assert dictionaries.get_or_default(data, "b", 0) == 0
        factory = Mock(return_value=2)
        assert dictionaries.get_or_add(data, "b", factory) == 2
        assert dictionaries.get_or_add(data, "b", factory) == 2
        factory.assert_called_once_with("b")

    def test_merge(self):
        target = {"a": 1}
        dictionaries.merge(target, {"a": 9, "b": 2})
        assert target == {"a": 1, "b": 2}
        dictionaries.merge(target, {"a": 9}, overwrite=True)
        assert target["a"] == 9

    def test_to_query_string(self):
        query = dictionaries.to_query_string({"q": "a b&c", "page": 2, "empty": None})
        assert query == "q=a%20b%26c&page=2&empty="
        assert dictionaries.to_query_string({}) == ""

    def test_invert(self):
        assert dictionaries.invert({"a": 1, "b": 2}) == {1: "a", 2: "b"}
        with pytest.raises(ValueError):
            dictionaries.invert({"a": 1, "b": 1})

    def test_mutation_helpers(self):
        data = {"a": 1, "b": 2, "c": 3}
        dictionaries.add_or_update(data, "a", 10)
        assert dictionaries.remove_where(data, lambda k, v: v < 10) == 2
        assert data == {"a": 10}
        assert dictionaries.to_json(data) == '{"a":10}'
        assert dictionaries.is_null_or_empty({})


class TestMappings:

    def test_read_only_helpers(self):
        view = MappingProxyType({"a": 1, "b": 2})
        assert mappings.contains_all_keys(view, ["a", "b"])
        assert not mappings.contains_all_keys(view, ["a", "z"])
        assert mappings.contains_any_key(view, ["z", "b"])
        assert mappings.to_dict(view) == {"a": 1, "b": 2}
        assert mappings.filter_by_keys(view, ["b", "z"]) == {"b": 2}


class TestSequences:

    def test_index_lookup(self):
        data = (1, 2, 3, 2)
        assert sequences.index_of(data, 2) == 1
        assert sequences.last_index_of(data, 2) == 3
        assert sequences.index_of(data, 9) == -1
        assert sequences.is_null_or_empty(())

    def test_binary_search(self):
        data = [1, 3, 5, 7]
        assert sequences.binary_search(data, 5) == 2
        assert sequences.binary_search(data, 4) == ~2
        assert sequences.binary_search([], 1) == ~0

    def test_slice_range(self):
        assert sequences.slice_range([1, 2, 3, 4], 1, 2) == [2, 3]
        assert sequences.slice_range([1, 2], 2, 0) == []
        with pytest.raises(ValueError):
            sequences.slice_range([1, 2], 1, 2)


class TestSets:

    def test_helpers(self):
        data = {1, 2}
        assert sets.add_range(data, [2, 3, 4]) == 2
        assert sets.remove_where(data, lambda v: v > 2) == 2
        assert data == {1, 2}
        assert sets.to_sorted({3, 1, 2}) == [1, 2, 3]
        assert sets.overlaps_with(data, [2, 9])
        assert sets.symmetric_difference(data, [2, 3]) == {1, 3}
        assert sets.is_null_or_empty(set())


class TestQueuesAndStacks:

    def test_queue_is_fifo(self):
        queue = deque()
        assert queues.peek_or_default(queue, "none") == "none"
        queues.enqueue_range(queue, [1, 2, 3])
        assert queues.peek_or_default(queue) == 1
        assert queues.dequeue_or_default(queue) == 1
        assert queues.dequeue_many(queue, 5) == [2, 3]
        assert queues.is_null_or_empty(queue)
        with pytest.raises(ValueError):
            queues.dequeue_many(queue, -1)

    def test_queue_clone_is_independent(self):
        queue = deque([1, 2])
        copy = queues.clone(queue)
        copy.popleft()
        assert list(queue) == [1, 2]

    def test_stack_is_lifo(self):
        stack = []
        stacks.push_range(stack, [1, 2, 3])
        assert stacks.peek_or_default(stack) == 3
        assert stacks.pop_or_default(stack) == 3
        assert stacks.pop_many(stack, 5) == [2, 1]
        assert stacks.pop_or_default(stack, "empty") == "empty"
        with pytest.raises(ValueError):
            stacks.pop_many(stack, -1)

    def test_stack_clone_preserves_order(self):
        stack = [1, 2, 3]
        copy = stacks.clone(stack)
        assert stacks.pop_or_default(copy) == 3
        assert stack == [1, 2, 3]
