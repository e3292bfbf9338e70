"""Explicit comparators and predicate combinators.

There is no implicit ordering anywhere in the library; these helpers build
the function objects callers pass in.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from predalgo._util import BinaryPredicate, Predicate, StrictWeakOrdering

less: StrictWeakOrdering = operator.lt
greater: StrictWeakOrdering = operator.gt


def identity(elem: Any) -> Any:
    return elem


def by_key(key: Callable[[Any], Any], *, reverse: bool = False) -> StrictWeakOrdering:
    """Strict weak ordering on ``key(elem)``, descending when ``reverse``."""
    if reverse:
        def comp(a: Any, b: Any) -> bool:
            return key(b) < key(a)
    else:
        def comp(a: Any, b: Any) -> bool:
            return key(a) < key(b)
    return comp


def equivalent(comp: StrictWeakOrdering) -> BinaryPredicate:
    """Elements neither of which orders before the other."""
    def pred(a: Any, b: Any) -> bool:
        return not comp(a, b) and not comp(b, a)
    return pred


def negate(pred: Predicate) -> Predicate:
    def negated(elem: Any) -> bool:
        return not pred(elem)
    return negated


def equal_to(value: Any) -> Predicate:
    def pred(elem: Any) -> bool:
        return elem == value
    return pred
