from __future__ import annotations

import copy
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

from cart_prod.utils.size_hint import UNKNOWN, SizeHint, size_hint

T = TypeVar("T")


class NotRestartableError(TypeError):
    """A one-shot iterator was given where a restartable factor is needed."""


class Restartable(Generic[T]):
    """
    Re-iterable view over a zero-argument iterator factory.

    Every call to ``iter`` invokes the factory again, so a generator function
    can be used as an inner factor without collecting its output.
    >>> squares = Restartable(lambda: (x * x for x in range(3)), length=3)
    >>> list(squares), list(squares)
    ([0, 1, 4], [0, 1, 4])
    """

    def __init__(
        self, factory: Callable[[], Iterable[T]], length: Optional[int] = None
    ):
        if not callable(factory):
            raise TypeError(f"Restartable expects a callable, got {factory!r}")
        self._factory = factory
        self._length = length

    def __iter__(self) -> Iterator[T]:
        return iter(self._factory())

    def size_hint(self) -> SizeHint:
        if self._length is None:
            return UNKNOWN
        return (self._length, self._length)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._factory!r})"


class Source(Generic[T]):
    """
    Snapshot of a factor from which fresh iterators are derived.

    Re-iterable factors are held by reference, not copied, so they must not be
    mutated while a product is iterating over them.
    """

    def __init__(self, factor: Iterable[T], position: str):
        if isinstance(factor, Iterator):
            if not hasattr(type(factor), "__copy__"):
                raise NotRestartableError(
                    f"The {position} factor {factor!r} is a one-shot iterator; "
                    f"pass a re-iterable object, an iterator implementing "
                    f"__copy__ or a Restartable factory instead."
                )
            self._snapshot: Iterable[T] = copy.copy(factor)
            self._copies = True
        else:
            if not isinstance(factor, Iterable):
                # objects iterable through __getitem__ only
                try:
                    iter(factor)
                except TypeError:
                    raise TypeError(
                        f"The {position} factor {factor!r} is not iterable"
                    ) from None
            self._snapshot = factor
            self._copies = False
        self.position = position

    def fresh(self) -> Iterator[T]:
        if self._copies:
            return copy.copy(self._snapshot)  # type: ignore[return-value]
        return iter(self._snapshot)

    def size_hint(self) -> SizeHint:
        return size_hint(self._snapshot)
