from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from predalgo import _bisect, checked
from predalgo._cursor import materialize, span
from predalgo._order import by_key, greater, less
from predalgo._term import bold, dim, force_color, green, red
from predalgo._util import StrictWeakOrdering

_ORDERS: dict[str, StrictWeakOrdering] = {
    "asc": less,
    "desc": greater,
    "abs": by_key(abs),
}


def _parse_value(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def _load_data(data: str | None) -> list[Any]:
    raw = sys.stdin.read() if data is None else data
    seq = json.loads(raw)
    if not isinstance(seq, list):
        raise ValueError(f"expected a JSON array, got {type(seq).__name__}")
    return seq


def query(seq: list[Any], value: Any, comp: StrictWeakOrdering, *, check: bool = False) -> dict[str, Any]:
    """Run the bisection family for ``value`` over the whole of ``seq``."""
    algos = checked if check else _bisect
    first, last = span(seq)
    lower, upper = algos.equal_range(first, last, value, comp)
    return {
        "value": value,
        "lower_bound": algos.lower_bound(first, last, value, comp).pos,
        "upper_bound": algos.upper_bound(first, last, value, comp).pos,
        "equal_range": [lower.pos, upper.pos],
        "binary_search": algos.binary_search(first, last, value, comp),
        "matches": materialize(lower, upper),
    }


def _print_report(report: dict[str, Any]) -> None:
    lo, hi = report["equal_range"]
    found = green("true") if report["binary_search"] else red("false")
    print(f"  {'lower_bound':<14} {report['lower_bound']}")
    print(f"  {'upper_bound':<14} {report['upper_bound']}")
    print(f"  {'equal_range':<14} [{lo}, {hi})  {dim(f'({hi - lo} matching)')}")
    print(f"  {'binary_search':<14} {bold(found)}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="predalgo", description="Query a sorted JSON array by bisection.")
    p.add_argument("value", help="Value to look up, parsed as JSON (plain text if that fails)")
    p.add_argument("--data", help="JSON array to search (default: read from stdin)")
    p.add_argument("--order", choices=sorted(_ORDERS), default="asc", help="Ordering the array is sorted under")
    p.add_argument("--check", action="store_true", help="Verify that the array is sorted before searching")
    p.add_argument("--json", action="store_true", help="Output the result as a JSON object")
    p.add_argument("-q", "--quiet", action="store_true", help="Print nothing; only set the exit code")
    p.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    args = p.parse_args(argv)

    if args.no_color:
        force_color(False)

    try:
        seq = _load_data(args.data)
    except (json.JSONDecodeError, ValueError) as e:
        print(f"error: could not read data: {e}", file=sys.stderr)
        return 1

    value = _parse_value(args.value)
    try:
        report = query(seq, value, _ORDERS[args.order], check=args.check)
    except AssertionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except TypeError as e:
        print(f"error: cannot compare {value!r} with the data: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        if args.json:
            print(json.dumps(report, default=str))
        else:
            _print_report(report)

    return 0 if report["binary_search"] else 1
