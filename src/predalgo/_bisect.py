"""
  Bisection over sorted ranges

  All functions here require random-access cursors and a range sorted under
  `comp`, a strict weak ordering. Sortedness is assumed, never checked:
  unsorted input gives a meaningless (but valid) cursor.
"""
from __future__ import annotations

from typing import Any

from predalgo._cursor import RandomAccessCursor, distance
from predalgo._util import Predicate, StrictWeakOrdering


def partition_point(first: RandomAccessCursor, last: RandomAccessCursor, pred: Predicate) -> RandomAccessCursor:
    """
    Gives the partition point of range `[first, last)`
    That is, the cursor i where
          pred(*k) for all k in [first, i)
      not pred(*k) for all k in [i, last)

    Precondition: the range is supposed to be partitioned into
      first elements for which `pred` is true
      then elements for which `pred` is false

    Complexity:
      with N = distance(first, last)
      Time:
        ceil(log_2(N + 1)) applications of `pred`.
      Space
        Constant
    """
    while first != last:
        mid = first.advance(distance(first, last) // 2)
        if pred(mid.get()):
            first = mid.next()
        else:
            last = mid
    return first


def lower_bound(
    first: RandomAccessCursor, last: RandomAccessCursor, value: Any, comp: StrictWeakOrdering
) -> RandomAccessCursor:
    """Leftmost cursor at which `value` can be inserted keeping the range sorted.

    Every element before the result satisfies `comp(elem, value)`.
    """
    def pred(elem: Any) -> bool:
        return comp(elem, value)

    return partition_point(first, last, pred)


def upper_bound(
    first: RandomAccessCursor, last: RandomAccessCursor, value: Any, comp: StrictWeakOrdering
) -> RandomAccessCursor:
    """Rightmost insertion cursor for `value`: the first element `e` with
    `comp(value, e)`, or `last`.
    """
    def pred(elem: Any) -> bool:
        return not comp(value, elem)

    return partition_point(first, last, pred)


def equal_range(
    first: RandomAccessCursor, last: RandomAccessCursor, value: Any, comp: StrictWeakOrdering
) -> tuple[RandomAccessCursor, RandomAccessCursor]:
    """`(lower_bound, upper_bound)` for `value`.

    The upper bound is searched by bisection in `[lower, last)` only, so a
    long run of equivalent elements costs O(log N) rather than a linear walk.
    """
    lower = lower_bound(first, last, value, comp)
    return lower, upper_bound(lower, last, value, comp)


def binary_search(first: RandomAccessCursor, last: RandomAccessCursor, value: Any, comp: StrictWeakOrdering) -> bool:
    found = lower_bound(first, last, value, comp)
    return found != last and not comp(value, found.get())


def binary_find(
    first: RandomAccessCursor, last: RandomAccessCursor, value: Any, comp: StrictWeakOrdering
) -> RandomAccessCursor:
    """Cursor of the first element equivalent to `value`, or `last`."""
    found = lower_bound(first, last, value, comp)
    if found == last or comp(value, found.get()):
        return last
    return found
