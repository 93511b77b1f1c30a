from __future__ import annotations

from typing import Iterable, TypeVar, Union, overload

from .pair import PairProduct
from .triple import TripleProduct

T = TypeVar("T")

__all__ = ["PairProduct", "TripleProduct", "lazy_product"]


@overload
def lazy_product(outer: Iterable[T], inner: Iterable[T]) -> PairProduct[T]:
    ...


@overload
def lazy_product(a: Iterable[T], b: Iterable[T], c: Iterable[T]) -> TripleProduct[T]:
    ...


def lazy_product(*factors: Iterable[T]) -> Union[PairProduct[T], TripleProduct[T]]:
    """
    Returns the Cartesian product of two or three factors as a lazy iterator
    of lists. Every factor after the first must be restartable.
    >>> list(lazy_product([1, 2], [3, 4]))
    [[1, 3], [1, 4], [2, 3], [2, 4]]
    """
    if len(factors) == 2:
        return PairProduct(*factors)
    if len(factors) == 3:
        return TripleProduct(*factors)
    raise TypeError(
        f"lazy_product supports two or three factors, got {len(factors)}"
    )
