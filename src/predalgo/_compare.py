from __future__ import annotations

from predalgo._cursor import InputCursor
from predalgo._util import BinaryPredicate


def mismatch(
    first1: InputCursor,
    last1: InputCursor,
    first2: InputCursor,
    comp: BinaryPredicate,
) -> tuple[InputCursor, InputCursor]:
    """Walk both ranges in lock-step while ``comp(*a, *b)`` holds.

    Returns the pair of cursors at the first position where ``comp`` fails,
    or ``(last1, <counterpart in B>)``. The second range must hold at least
    as many elements as ``[first1, last1)``; its end is never checked.
    """
    while first1 != last1 and comp(first1.get(), first2.get()):
        first1 = first1.next()
        first2 = first2.next()
    return first1, first2


def equal(first1: InputCursor, last1: InputCursor, first2: InputCursor, comp: BinaryPredicate) -> bool:
    return mismatch(first1, last1, first2, comp)[0] == last1
