from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from cart_prod.utils.iteration import Source
from cart_prod.utils.size_hint import EMPTY, SizeHint, add_hints, mul_hints, size_hint

T = TypeVar("T")

_LOG = logging.getLogger(__name__)

_EXHAUSTED = object()


class PairProduct(Generic[T]):
    """
    Lazy Cartesian product of two factors yielding ``[outer, inner]`` rows.

    The outer factor is consumed once, in order. The inner factor must be
    restartable (see :class:`cart_prod.utils.iteration.Source`) and is
    re-derived every time the outer factor advances. Rows come out in the
    same order as the nested loop
    ``for a in outer: for b in inner: yield [a, b]``. A re-iterable inner
    factor such as a list is used in place, not copied, so it must not be
    mutated while the product is being iterated.
    >>> list(PairProduct(range(2), range(2)))
    [[0, 0], [0, 1], [1, 0], [1, 1]]
    """

    def __init__(self, outer: Iterable[T], inner: Iterable[T]):
        self._inner_source: Source[T] = Source(inner, "inner")
        self._outer: Iterator[T] = iter(outer)
        self._inner: Optional[Iterator[T]] = None
        self._outer_current: Optional[T] = None
        self._primed = False
        self._exhausted = False
        _LOG.debug(
            f"Created {type(self).__name__} over "
            f"{type(outer).__name__} x {type(inner).__name__}"
        )

    def __iter__(self) -> PairProduct[T]:
        return self

    def __next__(self) -> List[T]:
        if self._exhausted:
            raise StopIteration
        if self._primed:
            assert self._inner is not None
            value = next(self._inner, _EXHAUSTED)
            if value is not _EXHAUSTED:
                return [self._outer_current, value]  # type: ignore[list-item]
        return self._advance_outer()

    def _advance_outer(self) -> List[T]:
        for outer_value in self._outer:
            self._inner = self._inner_source.fresh()
            value = next(self._inner, _EXHAUSTED)
            if value is not _EXHAUSTED:
                self._outer_current = outer_value
                self._primed = True
                return [outer_value, value]  # type: ignore[list-item]
            _LOG.debug(f"Skipping outer value {outer_value!r}: inner factor is empty")
        self._finish()
        raise StopIteration

    def _finish(self) -> None:
        _LOG.debug(f"{type(self).__name__} exhausted")
        self._exhausted = True
        self._inner = None
        self._outer_current = None

    def size_hint(self) -> SizeHint:
        if self._exhausted:
            return EMPTY
        remaining_outer = mul_hints(
            size_hint(self._outer), self._inner_source.size_hint()
        )
        if not self._primed:
            return remaining_outer
        return add_hints(size_hint(self._inner), remaining_outer)

    def __length_hint__(self) -> int:
        return self.size_hint()[0]
