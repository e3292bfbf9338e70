from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from predalgo._util import _qualified_name, _safe_call

_CONTRACTS_ATTR = "__predalgo_contracts__"
_ORIGINAL_ATTR = "__predalgo_original__"


def _root_original(fn: Callable[..., Any]) -> Callable[..., Any]:
    cur = fn
    while True:
        nxt = getattr(cur, _ORIGINAL_ATTR, None)
        if nxt is None:
            return cur
        cur = nxt


def _contracts(fn: Callable[..., Any]) -> dict[str, list[str]]:
    base = _root_original(fn)
    if not hasattr(base, _CONTRACTS_ATTR):
        setattr(base, _CONTRACTS_ATTR, {"requires": [], "ensures": []})
    return getattr(base, _CONTRACTS_ATTR)  # type: ignore[no-any-return]


def _set_original(wrapper: Callable[..., Any], original: Callable[..., Any]) -> None:
    setattr(wrapper, _ORIGINAL_ATTR, original)


def describe_contracts(fn: Callable[..., Any]) -> dict[str, list[str]]:
    """Descriptions of the pre/postconditions attached to ``fn``, outermost first."""
    c = _contracts(fn)
    return {"requires": list(reversed(c["requires"])), "ensures": list(reversed(c["ensures"]))}


def requires(
    pred: Callable[..., bool], description: str
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Check ``pred(*args, **kwargs)`` before every call.

    Raises ``AssertionError`` naming the function and ``description`` (or the
    exception raised by ``pred``) when it does not hold.
    """
    def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
        _contracts(fn)["requires"].append(description)

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            ok, err = _safe_call(pred, *args, **kwargs)
            if not ok:
                raise AssertionError(
                    f"Precondition failed for {_qualified_name(_root_original(fn))}: {err or description}"
                )
            return fn(*args, **kwargs)

        _set_original(wrapper, fn)
        return wrapper

    return deco


def ensures(
    pred: Callable[..., bool], description: str
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Check ``pred(*args, result=result, **kwargs)`` after every call."""
    def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
        _contracts(fn)["ensures"].append(description)

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = fn(*args, **kwargs)
            ok, err = _safe_call(pred, *args, **kwargs, result=result)
            if not ok:
                raise AssertionError(
                    f"Postcondition failed for {_qualified_name(_root_original(fn))}: {err or description}"
                )
            return result

        _set_original(wrapper, fn)
        return wrapper

    return deco
