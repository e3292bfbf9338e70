"""Cursor protocols and the sequence-backed cursor adapters.

Algorithms only rely on the structural protocols below. ``SeqCursor`` and
``BackInserter`` adapt ordinary Python containers so that a list (or any
indexable, length-aware object such as a numpy array) can be passed as a
range without writing a cursor type.

Cursors are values: ``next()`` and ``advance()`` return new cursors and leave
the receiver untouched.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class InputCursor(Protocol):
    """Readable position that can step forward and compare for equality."""

    def get(self) -> Any: ...

    def next(self) -> InputCursor: ...


@runtime_checkable
class OutputCursor(Protocol):
    """Writable position that can step forward."""

    def put(self, value: Any) -> None: ...

    def next(self) -> OutputCursor: ...


@runtime_checkable
class ForwardCursor(Protocol):
    """Readable and writable position over a multi-pass range."""

    def get(self) -> Any: ...

    def put(self, value: Any) -> None: ...

    def next(self) -> ForwardCursor: ...


@runtime_checkable
class RandomAccessCursor(Protocol):
    """Forward cursor with O(1) repositioning and distance.

    Required by the bisection algorithms, which must jump to a midpoint
    without stepping there.
    """

    def get(self) -> Any: ...

    def put(self, value: Any) -> None: ...

    def next(self) -> RandomAccessCursor: ...

    def advance(self, n: int) -> RandomAccessCursor: ...

    def distance_to(self, other: Any) -> int: ...


def advance(cursor: RandomAccessCursor, n: int) -> RandomAccessCursor:
    return cursor.advance(n)


def distance(first: RandomAccessCursor, last: RandomAccessCursor) -> int:
    """Signed number of steps from ``first`` to ``last``."""
    return first.distance_to(last)


class SeqCursor:
    """Random-access cursor over an indexable container.

    Two cursors are equal when they refer to the same container object and
    the same position.
    """

    __slots__ = ("pos", "seq")

    def __init__(self, seq: Any, pos: int = 0) -> None:
        self.seq = seq
        self.pos = pos

    def get(self) -> Any:
        return self.seq[self.pos]

    def put(self, value: Any) -> None:
        self.seq[self.pos] = value

    def next(self) -> SeqCursor:
        return SeqCursor(self.seq, self.pos + 1)

    def advance(self, n: int) -> SeqCursor:
        return SeqCursor(self.seq, self.pos + n)

    def distance_to(self, other: SeqCursor) -> int:
        return other.pos - self.pos

    def remaining(self) -> int:
        return len(self.seq) - self.pos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeqCursor):
            return NotImplemented
        return self.seq is other.seq and self.pos == other.pos

    def __hash__(self) -> int:
        return hash((id(self.seq), self.pos))

    def __repr__(self) -> str:
        return f"SeqCursor(<{type(self.seq).__name__}>, pos={self.pos})"


class BackInserter:
    """Output cursor appending every written value to ``target``."""

    __slots__ = ("target",)

    def __init__(self, target: Any) -> None:
        self.target = target

    def put(self, value: Any) -> None:
        self.target.append(value)

    def next(self) -> BackInserter:
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BackInserter):
            return NotImplemented
        return self.target is other.target

    def __hash__(self) -> int:
        return hash(id(self.target))

    def __repr__(self) -> str:
        return f"BackInserter(<{type(self.target).__name__}>)"


def span(seq: Any, start: int = 0, stop: int | None = None) -> tuple[SeqCursor, SeqCursor]:
    """Return the ``(first, last)`` range over ``seq[start:stop]``."""
    if stop is None:
        stop = len(seq)
    return SeqCursor(seq, start), SeqCursor(seq, stop)


def materialize(first: InputCursor, last: InputCursor) -> list[Any]:
    out: list[Any] = []
    while first != last:
        out.append(first.get())
        first = first.next()
    return out
