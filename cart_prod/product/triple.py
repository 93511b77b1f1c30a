from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from cart_prod.utils.iteration import Source
from cart_prod.utils.size_hint import EMPTY, SizeHint, add_hints, mul_hints, size_hint

T = TypeVar("T")

_LOG = logging.getLogger(__name__)

_EXHAUSTED = object()


class TripleProduct(Generic[T]):
    """
    Lazy Cartesian product of three factors yielding ``[x, y, z]`` rows.

    ``a`` varies slowest and is consumed once. ``b`` is re-derived whenever
    ``a`` advances and ``c`` whenever ``b`` advances, so ``b`` and ``c`` must be
    restartable. Outer values whose nested sequence turns out empty are
    skipped at both levels. Re-iterable factors such as lists are used in
    place, not copied, so they must not be mutated while iterating.
    >>> list(TripleProduct(range(2), range(1), range(2)))
    [[0, 0, 0], [0, 0, 1], [1, 0, 0], [1, 0, 1]]
    """

    def __init__(self, a: Iterable[T], b: Iterable[T], c: Iterable[T]):
        self._b_source: Source[T] = Source(b, "middle")
        self._c_source: Source[T] = Source(c, "inner")
        self._a: Iterator[T] = iter(a)
        self._b: Optional[Iterator[T]] = None
        self._c: Optional[Iterator[T]] = None
        self._a_current: Optional[T] = None
        self._b_current: Optional[T] = None
        self._primed = False
        self._exhausted = False
        _LOG.debug(
            f"Created {type(self).__name__} over {type(a).__name__} x "
            f"{type(b).__name__} x {type(c).__name__}"
        )

    def __iter__(self) -> TripleProduct[T]:
        return self

    def __next__(self) -> List[T]:
        if self._exhausted:
            raise StopIteration
        if self._primed:
            assert self._c is not None
            z = next(self._c, _EXHAUSTED)
            if z is not _EXHAUSTED:
                return [self._a_current, self._b_current, z]  # type: ignore[list-item]
            row = self._advance_middle()
            if row is not None:
                return row
        return self._advance_outer()

    def _advance_middle(self) -> Optional[List[T]]:
        assert self._b is not None
        for y in self._b:
            self._c = self._c_source.fresh()
            z = next(self._c, _EXHAUSTED)
            if z is not _EXHAUSTED:
                self._b_current = y
                return [self._a_current, y, z]  # type: ignore[list-item]
            _LOG.debug(f"Skipping middle value {y!r}: inner factor is empty")
        return None

    def _advance_outer(self) -> List[T]:
        for x in self._a:
            self._a_current = x
            self._b = self._b_source.fresh()
            row = self._advance_middle()
            if row is not None:
                self._primed = True
                return row
            _LOG.debug(f"Skipping outer value {x!r}: nested factors are empty")
        self._finish()
        raise StopIteration

    def _finish(self) -> None:
        _LOG.debug(f"{type(self).__name__} exhausted")
        self._exhausted = True
        self._b = None
        self._c = None
        self._a_current = None
        self._b_current = None

    def size_hint(self) -> SizeHint:
        if self._exhausted:
            return EMPTY
        c_total = self._c_source.size_hint()
        remaining_a = mul_hints(size_hint(self._a), self._b_source.size_hint(), c_total)
        if not self._primed:
            return remaining_a
        remaining_b = mul_hints(size_hint(self._b), c_total)
        return add_hints(size_hint(self._c), remaining_b, remaining_a)

    def __length_hint__(self) -> int:
        return self.size_hint()[0]
