"""Range queries over records kept sorted by one field.

The comparator orders by ``year`` only, so records from the same year are
equivalent and ``equal_range`` returns the whole run of them.
"""

from __future__ import annotations

from dataclasses import dataclass

from predalgo import BackInserter, by_key, copy_if, equal_range, lower_bound, materialize, span, upper_bound


@dataclass
class Release:
    name: str
    year: int


def _year(r: Release | int) -> int:
    return r if isinstance(r, int) else r.year


by_year = by_key(_year)


def released_in(releases: list[Release], year: int) -> list[Release]:
    first, last = equal_range(*span(releases), year, by_year)
    return materialize(first, last)


def released_between(releases: list[Release], start: int, stop: int) -> list[Release]:
    """Releases with ``start <= year < stop``."""
    first, last = span(releases)
    lo = lower_bound(first, last, start, by_year)
    hi = lower_bound(lo, last, stop, by_year)
    return materialize(lo, hi)


def insert_sorted(releases: list[Release], release: Release) -> int:
    """Insert after any existing releases of the same year; returns the index used."""
    pos = upper_bound(*span(releases), release, by_year).pos
    releases.insert(pos, release)
    return pos


def names_matching(releases: list[Release], prefix: str) -> list[str]:
    out: list[Release] = []
    copy_if(*span(releases), BackInserter(out), lambda r: r.name.startswith(prefix))
    return [r.name for r in out]
