"""Single-pass algorithms over one range.

None of these validate the range or the predicate: a predicate that mutates
the range while it is being traversed gives unspecified results.
"""

from __future__ import annotations

from typing import Any

from predalgo._cursor import ForwardCursor, InputCursor, OutputCursor
from predalgo._util import BinaryPredicate, Predicate


def find_if(first: InputCursor, last: InputCursor, pred: Predicate) -> InputCursor:
    """Return the first cursor in ``[first, last)`` whose element satisfies
    ``pred``, or ``last`` if there is none.
    """
    while first != last and not pred(first.get()):
        first = first.next()
    return first


def count_if(first: InputCursor, last: InputCursor, pred: Predicate) -> int:
    total = 0
    while first != last:
        if pred(first.get()):
            total += 1
        first = first.next()
    return total


def adjacent_find(first: ForwardCursor, last: ForwardCursor, pred: BinaryPredicate) -> ForwardCursor:
    """Return the first cursor ``i`` such that ``pred(*i, *(i + 1))``.

    Ranges of fewer than two elements give ``last``.
    """
    if first == last:
        return last
    prev = first
    cur = first.next()
    while cur != last:
        if pred(prev.get(), cur.get()):
            return prev
        prev = cur
        cur = cur.next()
    return last


def copy_if(first: InputCursor, last: InputCursor, result: OutputCursor, pred: Predicate) -> OutputCursor:
    """Copy the elements satisfying ``pred`` to ``result``, in order.

    Returns the output cursor past the last element written.
    """
    while first != last:
        value = first.get()
        if pred(value):
            result.put(value)
            result = result.next()
        first = first.next()
    return result


def replace_if(first: ForwardCursor, last: ForwardCursor, pred: Predicate, new_value: Any) -> None:
    while first != last:
        if pred(first.get()):
            first.put(new_value)
        first = first.next()


def replace_copy_if(
    first: InputCursor,
    last: InputCursor,
    result: OutputCursor,
    pred: Predicate,
    new_value: Any,
) -> OutputCursor:
    """Copy ``[first, last)`` to ``result``, writing ``new_value`` in place of
    every element satisfying ``pred``.

    Exactly one value is written per input element.
    """
    while first != last:
        value = first.get()
        result.put(new_value if pred(value) else value)
        result = result.next()
        first = first.next()
    return result


def remove_copy_if(first: InputCursor, last: InputCursor, result: OutputCursor, pred: Predicate) -> OutputCursor:
    """Copy the elements for which ``pred`` is false to ``result``.

    Stable: copied elements keep their relative order. Returns the end of the
    written range.

    ``result`` may be ``first`` itself (see ``remove_if``): the write cursor
    never overtakes the read cursor, so every element is read before the
    position it occupies is overwritten.
    """
    while first != last:
        value = first.get()
        if not pred(value):
            result.put(value)
            result = result.next()
        first = first.next()
    return result


def remove_if(first: ForwardCursor, last: ForwardCursor, pred: Predicate) -> ForwardCursor:
    """Compact ``[first, last)`` in place, dropping elements satisfying ``pred``.

    Returns the new logical end. Positions in ``[new_end, last)`` keep
    whatever values they held, which are still valid elements but otherwise
    unspecified.

    Complexity:
      with N = distance(first, last)
      Time:
        N applications of `pred`.
        at most N writes
      Space
        Constant
    """
    return remove_copy_if(first, last, first, pred)
