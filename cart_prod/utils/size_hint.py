from __future__ import annotations

from collections.abc import Sized
from typing import Any, Optional, Tuple

from typing_extensions import Protocol, runtime_checkable

SizeHint = Tuple[int, Optional[int]]

UNKNOWN: SizeHint = (0, None)
EMPTY: SizeHint = (0, 0)


@runtime_checkable
class SupportsSizeHint(Protocol):
    def size_hint(self) -> SizeHint:
        """Lower and optional upper bound of the elements left to produce."""
        ...


# built-in iterators whose __length_hint__ is the exact number of items left
_EXACT_LENGTH_HINT = frozenset(
    type(iterator)
    for iterator in (
        iter(range(0)),
        iter(range(2**64)),
        iter([]),
        iter(()),
        iter(""),
        iter("\u00e9"),
        iter(b""),
        iter(bytearray()),
        iter(set()),
        iter({}),
        iter({}.values()),
        iter({}.items()),
        reversed([]),
        reversed(range(0)),
    )
)


def size_hint(obj: Any) -> SizeHint:
    """
    Bounds on the number of elements ``obj`` has left to produce.

    Objects with their own ``size_hint`` are trusted and ``Sized`` objects are
    exact. ``__length_hint__`` is only an estimate in general, so it is used
    solely for built-in iterators known to report their remaining length.
    """
    if isinstance(obj, SupportsSizeHint):
        return obj.size_hint()
    if isinstance(obj, Sized):
        length = len(obj)
        return (length, length)
    if type(obj) not in _EXACT_LENGTH_HINT:
        return UNKNOWN
    hint = type(obj).__length_hint__(obj)
    return (hint, hint)


def mul_hints(*hints: SizeHint) -> SizeHint:
    lower = 1
    upper: Optional[int] = 1
    empty = False
    for low, high in hints:
        lower *= low
        if high == 0:
            empty = True
        elif high is None or upper is None:
            upper = None
        else:
            upper *= high
    if empty:
        return EMPTY
    return (lower, upper)


def add_hints(*hints: SizeHint) -> SizeHint:
    lower = 0
    upper: Optional[int] = 0
    for low, high in hints:
        lower += low
        if high is None or upper is None:
            upper = None
        else:
            upper += high
    return (lower, upper)
