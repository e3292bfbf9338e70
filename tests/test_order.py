"""Tests for comparator and predicate helpers."""

from __future__ import annotations

from predalgo import by_key, equal_to, equivalent, greater, less, negate


class TestComparators:
    def test_less_and_greater(self):
        assert less(1, 2) and not less(2, 1) and not less(1, 1)
        assert greater(2, 1) and not greater(1, 2) and not greater(1, 1)

    def test_by_key(self):
        comp = by_key(len)
        assert comp("a", "bb")
        assert not comp("bb", "cc")

    def test_by_key_reverse(self):
        comp = by_key(abs, reverse=True)
        assert comp(-5, 2)
        assert not comp(2, -5)
        assert not comp(3, -3)

    def test_by_key_is_irreflexive(self):
        comp = by_key(abs)
        for x in (-2, 0, 7):
            assert not comp(x, x)


class TestCombinators:
    def test_equivalent(self):
        same_abs = equivalent(by_key(abs))
        assert same_abs(-3, 3)
        assert not same_abs(2, 3)

    def test_negate(self):
        is_odd = negate(lambda x: x % 2 == 0)
        assert is_odd(3) and not is_odd(4)

    def test_equal_to(self):
        assert equal_to("x")("x")
        assert not equal_to("x")("y")
