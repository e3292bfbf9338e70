"""In-place compaction of a buffer of readings."""

from __future__ import annotations

import math

from predalgo import count_if, remove_if, replace_if, span


def drop_missing(readings: list[float]) -> int:
    """Move the non-NaN readings to the front, truncate, and return how many were dropped."""
    first, last = span(readings)
    end = remove_if(first, last, math.isnan)
    dropped = len(readings) - end.pos
    del readings[end.pos:]
    return dropped


def clamp_negative(readings: list[float]) -> int:
    first, last = span(readings)
    n = count_if(first, last, lambda x: x < 0)
    replace_if(first, last, lambda x: x < 0, 0.0)
    return n
