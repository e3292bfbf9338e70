"""Hypothesis strategies for property-testing code built on predalgo.

``orderings()`` draws named strict weak orderings, several of which have
non-trivial equivalence classes (``abs``, ``mod3``) so that duplicate
handling in the bisection algorithms is exercised beyond plain equality.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from predalgo._cursor import SeqCursor, span
from predalgo._order import identity


class Ordering:
    """A strict weak ordering on ``key(elem)``, usable as a comparator."""

    __slots__ = ("key", "name", "reverse")

    def __init__(self, name: str, key: Callable[[Any], Any], reverse: bool = False) -> None:
        self.name = name
        self.key = key
        self.reverse = reverse

    def __call__(self, a: Any, b: Any) -> bool:
        if self.reverse:
            return self.key(b) < self.key(a)
        return self.key(a) < self.key(b)

    def sort(self, xs: list[Any]) -> list[Any]:
        return sorted(xs, key=self.key, reverse=self.reverse)

    def __repr__(self) -> str:
        return f"Ordering({self.name})"


def _mod3(x: int) -> int:
    return x % 3


_ORDERINGS: dict[str, Ordering] = {}


def register_ordering(name: str, key: Callable[[Any], Any], reverse: bool = False) -> Ordering:
    ordering = Ordering(name, key, reverse)
    _ORDERINGS[name] = ordering
    return ordering


register_ordering("asc", identity)
register_ordering("desc", identity, reverse=True)
register_ordering("abs", abs)
register_ordering("mod3", _mod3)


def orderings() -> st.SearchStrategy[Ordering]:
    return st.sampled_from(sorted(_ORDERINGS.values(), key=lambda o: o.name))


def sorted_lists(
    elements: st.SearchStrategy[Any], ordering: Ordering, *, max_size: int = 30
) -> st.SearchStrategy[list[Any]]:
    return st.lists(elements, max_size=max_size).map(ordering.sort)


@st.composite
def spans(draw: Any, lists: st.SearchStrategy[list[Any]]) -> tuple[list[Any], SeqCursor, SeqCursor]:
    """Draw a list and a sub-range ``[lo, hi)`` of it."""
    seq = draw(lists)
    lo = draw(st.integers(min_value=0, max_value=len(seq)))
    hi = draw(st.integers(min_value=lo, max_value=len(seq)))
    first, last = span(seq, lo, hi)
    return seq, first, last
