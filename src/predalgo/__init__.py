from predalgo._bisect import binary_find, binary_search, equal_range, lower_bound, partition_point, upper_bound
from predalgo._cli import main
from predalgo._compare import equal, mismatch
from predalgo._contracts import describe_contracts, ensures, requires
from predalgo._cursor import (
    BackInserter,
    ForwardCursor,
    InputCursor,
    OutputCursor,
    RandomAccessCursor,
    SeqCursor,
    advance,
    distance,
    materialize,
    span,
)
from predalgo._order import by_key, equal_to, equivalent, greater, less, negate
from predalgo._scan import (
    adjacent_find,
    copy_if,
    count_if,
    find_if,
    remove_copy_if,
    remove_if,
    replace_copy_if,
    replace_if,
)

__all__ = [
    "BackInserter",
    "ForwardCursor",
    "InputCursor",
    "OutputCursor",
    "RandomAccessCursor",
    "SeqCursor",
    "adjacent_find",
    "advance",
    "binary_find",
    "binary_search",
    "by_key",
    "copy_if",
    "count_if",
    "describe_contracts",
    "distance",
    "ensures",
    "equal",
    "equal_range",
    "equal_to",
    "equivalent",
    "find_if",
    "greater",
    "less",
    "lower_bound",
    "main",
    "materialize",
    "mismatch",
    "negate",
    "partition_point",
    "remove_copy_if",
    "remove_if",
    "replace_copy_if",
    "replace_if",
    "requires",
    "span",
    "upper_bound",
]
