from typing import Callable, Iterable, Iterator, List, Sequence, Tuple

from cart_prod.utils.iteration import Restartable
from cart_prod.utils.size_hint import SizeHint


class CopyableCounter:
    """Iterator over ``start..stop`` that can be duplicated with copy.copy."""

    def __init__(self, stop: int, start: int = 0):
        self._current = start
        self._stop = stop

    def __iter__(self) -> "CopyableCounter":
        return self

    def __next__(self) -> int:
        if self._current >= self._stop:
            raise StopIteration
        value = self._current
        self._current += 1
        return value

    def __copy__(self) -> "CopyableCounter":
        return CopyableCounter(self._stop, self._current)

    def size_hint(self) -> SizeHint:
        left = max(self._stop - self._current, 0)
        return (left, left)


class Estimating:
    """Iterator over ``values`` whose length hint is far too high."""

    def __init__(self, values: Iterable[int], claimed: int = 100):
        self._values = iter(values)
        self._claimed = claimed

    def __iter__(self) -> "Estimating":
        return self

    def __next__(self) -> int:
        return next(self._values)

    def __length_hint__(self) -> int:
        return self._claimed


class SequenceOnly:
    """Iterable only through the legacy ``__getitem__`` protocol."""

    def __init__(self, *items: int):
        self._items = items

    def __getitem__(self, index: int) -> int:
        return self._items[index]


def varying(*runs: Sequence[int]) -> Restartable[int]:
    """A restartable whose n-th restart yields ``runs[n]``."""
    remaining: Iterator[Sequence[int]] = iter(runs)
    factory: Callable[[], Iterator[int]] = lambda: iter(next(remaining))
    return Restartable(factory)


def drain_with_hints(product) -> List[Tuple[SizeHint, int]]:
    """Pair the size hint seen before every pull with the rows really left."""
    hints = []
    rows = []
    while True:
        hints.append(product.size_hint())
        row = next(product, None)
        if row is None:
            break
        rows.append(row)
    return [(hint, len(rows) - index) for index, hint in enumerate(hints)]
