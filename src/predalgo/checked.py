"""Precondition-checked counterparts of every algorithm.

The plain algorithms trust their callers. The functions here take the same
arguments, verify what can be verified (range validity, sortedness,
partitioning, room in the second range) and then delegate. A violated
contract raises ``AssertionError``; on valid input the results are identical.

Checks cost O(N) per call, which defeats the point of bisection; use this
module while debugging or in tests.
"""

from __future__ import annotations

from typing import Any

from predalgo import _bisect, _compare, _scan
from predalgo._contracts import ensures, requires
from predalgo._cursor import RandomAccessCursor, SeqCursor
from predalgo._order import negate
from predalgo._util import BinaryPredicate, Predicate, StrictWeakOrdering


def _reachable(first: Any, last: Any, *_args: Any, **_kwargs: Any) -> bool:
    if isinstance(first, SeqCursor) and isinstance(last, SeqCursor):
        return first.seq is last.seq and 0 <= first.pos <= last.pos <= len(first.seq)
    if isinstance(first, RandomAccessCursor):
        return first.distance_to(last) >= 0
    # forward-only: unchecked
    return True


def _sorted(first: Any, last: Any, value: Any, comp: StrictWeakOrdering) -> bool:
    def descends(prev: Any, cur: Any) -> bool:
        return comp(cur, prev)

    return _scan.adjacent_find(first, last, descends) == last


def _partitioned(first: Any, last: Any, pred: Predicate) -> bool:
    boundary = _scan.find_if(first, last, negate(pred))
    return _scan.find_if(boundary, last, pred) == last


def _second_range_long_enough(first1: Any, last1: Any, first2: Any, comp: BinaryPredicate) -> bool:
    if isinstance(first1, SeqCursor) and isinstance(first2, SeqCursor):
        return first2.remaining() >= first1.distance_to(last1)
    return True


def _brackets_lower(first: Any, last: Any, value: Any, comp: StrictWeakOrdering, result: Any) -> bool:
    def not_below(elem: Any) -> bool:
        return not comp(elem, value)

    if _scan.find_if(first, result, not_below) != result:
        return False
    return result == last or not comp(result.get(), value)


def _brackets_upper(first: Any, last: Any, value: Any, comp: StrictWeakOrdering, result: Any) -> bool:
    def above(elem: Any) -> bool:
        return comp(value, elem)

    if _scan.find_if(first, result, above) != result:
        return False
    return result == last or comp(value, result.get())


def _bounds_ordered(first: Any, last: Any, value: Any, comp: StrictWeakOrdering, result: Any) -> bool:
    lower, upper = result
    return (
        _reachable(first, lower)
        and _reachable(lower, upper)
        and _reachable(upper, last)
        and _brackets_lower(first, last, value, comp, lower)
        and _brackets_upper(first, last, value, comp, upper)
    )


def _kept_prefix_clean(first: Any, last: Any, pred: Predicate, result: Any) -> bool:
    return _scan.find_if(first, result, pred) == result


# ---------------------------------------------------------------------------
# linear scans
# ---------------------------------------------------------------------------

@requires(_reachable, "first does not reach last")
def find_if(first: Any, last: Any, pred: Predicate) -> Any:
    return _scan.find_if(first, last, pred)


@requires(_reachable, "first does not reach last")
def count_if(first: Any, last: Any, pred: Predicate) -> int:
    return _scan.count_if(first, last, pred)


@requires(_reachable, "first does not reach last")
def adjacent_find(first: Any, last: Any, pred: BinaryPredicate) -> Any:
    return _scan.adjacent_find(first, last, pred)


@requires(_reachable, "first does not reach last")
def copy_if(first: Any, last: Any, result: Any, pred: Predicate) -> Any:
    return _scan.copy_if(first, last, result, pred)


@requires(_reachable, "first does not reach last")
def replace_if(first: Any, last: Any, pred: Predicate, new_value: Any) -> None:
    _scan.replace_if(first, last, pred, new_value)


@requires(_reachable, "first does not reach last")
def replace_copy_if(first: Any, last: Any, result: Any, pred: Predicate, new_value: Any) -> Any:
    return _scan.replace_copy_if(first, last, result, pred, new_value)


@requires(_reachable, "first does not reach last")
def remove_copy_if(first: Any, last: Any, result: Any, pred: Predicate) -> Any:
    return _scan.remove_copy_if(first, last, result, pred)


@requires(_reachable, "first does not reach last")
@ensures(_kept_prefix_clean, "removed element left before the new end")
def remove_if(first: Any, last: Any, pred: Predicate) -> Any:
    return _scan.remove_if(first, last, pred)


# ---------------------------------------------------------------------------
# paired ranges
# ---------------------------------------------------------------------------

@requires(_reachable, "first1 does not reach last1")
@requires(_second_range_long_enough, "second range is shorter than the first")
def mismatch(first1: Any, last1: Any, first2: Any, comp: BinaryPredicate) -> tuple[Any, Any]:
    return _compare.mismatch(first1, last1, first2, comp)


@requires(_reachable, "first1 does not reach last1")
@requires(_second_range_long_enough, "second range is shorter than the first")
def equal(first1: Any, last1: Any, first2: Any, comp: BinaryPredicate) -> bool:
    return _compare.equal(first1, last1, first2, comp)


# ---------------------------------------------------------------------------
# bisection
# ---------------------------------------------------------------------------

@requires(_reachable, "first does not reach last")
@requires(_partitioned, "range is not partitioned by pred")
def partition_point(first: Any, last: Any, pred: Predicate) -> Any:
    return _bisect.partition_point(first, last, pred)


@requires(_reachable, "first does not reach last")
@requires(_sorted, "range is not sorted under comp")
@ensures(_brackets_lower, "result is not the first position not ordered below value")
def lower_bound(first: Any, last: Any, value: Any, comp: StrictWeakOrdering) -> Any:
    return _bisect.lower_bound(first, last, value, comp)


@requires(_reachable, "first does not reach last")
@requires(_sorted, "range is not sorted under comp")
@ensures(_brackets_upper, "result is not the first position ordered above value")
def upper_bound(first: Any, last: Any, value: Any, comp: StrictWeakOrdering) -> Any:
    return _bisect.upper_bound(first, last, value, comp)


@requires(_reachable, "first does not reach last")
@requires(_sorted, "range is not sorted under comp")
@ensures(_bounds_ordered, "bounds do not bracket the run equivalent to value")
def equal_range(first: Any, last: Any, value: Any, comp: StrictWeakOrdering) -> tuple[Any, Any]:
    return _bisect.equal_range(first, last, value, comp)


@requires(_reachable, "first does not reach last")
@requires(_sorted, "range is not sorted under comp")
def binary_search(first: Any, last: Any, value: Any, comp: StrictWeakOrdering) -> bool:
    return _bisect.binary_search(first, last, value, comp)


@requires(_reachable, "first does not reach last")
@requires(_sorted, "range is not sorted under comp")
def binary_find(first: Any, last: Any, value: Any, comp: StrictWeakOrdering) -> Any:
    return _bisect.binary_find(first, last, value, comp)
