"""Tests for the linear scan algorithms."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from predalgo import (
    BackInserter,
    adjacent_find,
    copy_if,
    count_if,
    equal_to,
    find_if,
    materialize,
    negate,
    remove_copy_if,
    remove_if,
    replace_copy_if,
    replace_if,
    span,
)
from predalgo.strategies import spans


def is_even(x):
    return x % 2 == 0


int_lists = st.lists(st.integers(min_value=-50, max_value=50), max_size=30)


# ---------------------------------------------------------------------------
# find_if
# ---------------------------------------------------------------------------

class TestFindIf:
    def test_finds_first_match(self):
        xs = [1, 3, 4, 6]
        assert find_if(*span(xs), is_even).pos == 2

    def test_no_match_returns_last(self):
        xs = [1, 3, 5]
        first, last = span(xs)
        assert find_if(first, last, is_even) == last

    def test_empty_range(self):
        first, last = span([])
        assert find_if(first, last, is_even) == last

    def test_respects_sub_range(self):
        xs = [2, 1, 4]
        assert find_if(*span(xs, 1, 3), is_even).pos == 2

    @given(spans(int_lists))
    def test_first_match_property(self, drawn):
        seq, first, last = drawn
        found = find_if(first, last, is_even)
        assert first.pos <= found.pos <= last.pos
        assert not any(is_even(x) for x in seq[first.pos:found.pos])
        if found != last:
            assert is_even(found.get())


# ---------------------------------------------------------------------------
# count_if
# ---------------------------------------------------------------------------

class TestCountIf:
    def test_counts(self):
        assert count_if(*span([1, 2, 3, 4]), is_even) == 2

    def test_empty(self):
        assert count_if(*span([]), is_even) == 0

    @given(spans(int_lists))
    def test_predicate_and_complement_cover_range(self, drawn):
        _seq, first, last = drawn
        n = count_if(first, last, is_even) + count_if(first, last, negate(is_even))
        assert n == last.pos - first.pos


# ---------------------------------------------------------------------------
# adjacent_find
# ---------------------------------------------------------------------------

class TestAdjacentFind:
    def test_finds_first_pair(self):
        xs = [1, 2, 2, 3, 3]
        assert adjacent_find(*span(xs), lambda a, b: a == b).pos == 1

    def test_no_pair(self):
        xs = [1, 2, 3]
        first, last = span(xs)
        assert adjacent_find(first, last, lambda a, b: a == b) == last

    def test_empty_and_single(self):
        for xs in ([], [1]):
            first, last = span(xs)
            assert adjacent_find(first, last, lambda a, b: True) == last

    def test_pair_at_end(self):
        xs = [1, 2, 3, 1]
        assert adjacent_find(*span(xs), lambda a, b: a > b).pos == 2

    def test_pair_straddling_range_end_ignored(self):
        xs = [1, 2, 2]
        first, last = span(xs, 0, 2)
        assert adjacent_find(first, last, lambda a, b: a == b) == last


# ---------------------------------------------------------------------------
# copy_if
# ---------------------------------------------------------------------------

class TestCopyIf:
    def test_copies_matching_in_order(self):
        out: list[int] = []
        copy_if(*span([5, 2, 8, 3, 4]), BackInserter(out), is_even)
        assert out == [2, 8, 4]

    def test_into_existing_buffer(self):
        dst = [0] * 5
        first, last = span([1, 2, 3, 4])
        end = copy_if(first, last, span(dst)[0], is_even)
        assert end.pos == 2
        assert dst == [2, 4, 0, 0, 0]

    def test_empty(self):
        out: list[int] = []
        copy_if(*span([]), BackInserter(out), is_even)
        assert out == []


# ---------------------------------------------------------------------------
# replace_if / replace_copy_if
# ---------------------------------------------------------------------------

class TestReplaceIf:
    def test_replaces_in_place(self):
        xs = [1, 2, 3, 4]
        assert replace_if(*span(xs), is_even, 0) is None
        assert xs == [1, 0, 3, 0]

    def test_only_within_range(self):
        xs = [2, 2, 2, 2]
        replace_if(*span(xs, 1, 3), is_even, 9)
        assert xs == [2, 9, 9, 2]


class TestReplaceCopyIf:
    def test_one_output_per_input(self):
        src = [1, 2, 3, 4]
        dst = [None] * 4
        end = replace_copy_if(*span(src), span(dst)[0], is_even, -1)
        assert dst == [1, -1, 3, -1]
        assert end.pos == 4
        assert src == [1, 2, 3, 4]

    @given(int_lists)
    def test_output_length_matches_input(self, xs):
        out: list[int] = []
        replace_copy_if(*span(xs), BackInserter(out), is_even, 0)
        assert len(out) == len(xs)
        assert [0 if is_even(x) else x for x in xs] == out


# ---------------------------------------------------------------------------
# remove_copy_if / remove_if
# ---------------------------------------------------------------------------

class TestRemoveCopyIf:
    def test_copies_non_matching(self):
        out: list[int] = []
        remove_copy_if(*span([1, 2, 3, 4, 5]), BackInserter(out), is_even)
        assert out == [1, 3, 5]

    def test_source_untouched(self):
        src = [1, 2, 3]
        remove_copy_if(*span(src), BackInserter([]), is_even)
        assert src == [1, 2, 3]


class TestRemoveIf:
    def test_scenario_is_even(self):
        xs = [1, 2, 3, 4, 5]
        end = remove_if(*span(xs), is_even)
        assert end.pos == 3
        assert xs[:3] == [1, 3, 5]
        assert len(xs) == 5

    def test_nothing_removed(self):
        xs = [1, 3]
        first, last = span(xs)
        assert remove_if(first, last, is_even) == last
        assert xs == [1, 3]

    def test_everything_removed(self):
        xs = [2, 4]
        first, last = span(xs)
        assert remove_if(first, last, is_even) == first

    def test_empty(self):
        first, last = span([])
        assert remove_if(first, last, is_even) == first

    def test_removes_equal_value(self):
        xs = ["a", "b", "a", "c"]
        end = remove_if(*span(xs), equal_to("a"))
        assert xs[: end.pos] == ["b", "c"]

    @given(int_lists)
    def test_stable_compaction(self, xs):
        original = list(xs)
        first, last = span(xs)
        removed = count_if(first, last, is_even)
        end = remove_if(first, last, is_even)
        assert materialize(first, end) == [x for x in original if not is_even(x)]
        assert end.pos == len(original) - removed
        assert len(xs) == len(original)
