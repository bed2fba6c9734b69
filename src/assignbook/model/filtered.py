"""Pull-based filtered views.

A ``FilteredView`` pairs a *source* callable, which returns the current
base collection, with a predicate.  The view caches the filtered items
and recomputes them only when ``refresh`` or ``set_predicate`` is
called; owners refresh it after every mutation of the base collection.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Generic, TypeVar, overload

T = TypeVar("T")


class FilteredView(Sequence[T], Generic[T]):
    """Read-only sequence of the source items that satisfy a predicate.

    Parameters
    ----------
    source:
        Zero-argument callable returning the base items.
    predicate:
        Initial filter; defaults to accepting every item.
    """

    def __init__(
        self,
        source: Callable[[], Iterable[T]],
        predicate: Callable[[T], bool] | None = None,
    ) -> None:
        self._source = source
        self._predicate: Callable[[T], bool] = predicate or _accept_all
        self._items: tuple[T, ...] = ()
        self.refresh()

    @property
    def predicate(self) -> Callable[[T], bool]:
        return self._predicate

    def set_predicate(self, predicate: Callable[[T], bool]) -> None:
        """Replace the predicate and recompute immediately."""
        self._predicate = predicate
        self.refresh()

    def refresh(self) -> None:
        """Recompute the view from the current source items."""
        self._items = tuple(item for item in self._source() if self._predicate(item))

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilteredView):
            return self._items == other._items
        if isinstance(other, (tuple, list)):
            return list(self._items) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FilteredView({list(self._items)!r})"


def _accept_all(item: object) -> bool:
    return True
