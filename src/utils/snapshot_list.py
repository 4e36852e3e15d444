"""Copy-on-write list for data shared between threads.

Readers take :meth:`SnapshotList.snapshot` -- the currently published
tuple -- without locking and can iterate it freely while writers work.
Writers copy the tuple, change the copy and publish it with one reference
assignment, all under a per-list lock so concurrent writers never lose
each other's updates.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class SnapshotList(Generic[T]):
    """An ordered collection that is replaced, never mutated in place."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._write_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Reads (lock-free)
    # ------------------------------------------------------------------

    def snapshot(self) -> tuple[T, ...]:
        """Return the current point-in-time contents."""
        return self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------
    # Writes (serialized per list)
    # ------------------------------------------------------------------

    def append(self, item: T) -> None:
        with self._write_lock:
            self._items = (*self._items, item)

    def append_if(self, item: T, accept: Callable[[tuple[T, ...]], bool]) -> bool:
        """Append *item* only if ``accept(current_items)`` is true.

        The check and the append happen under the same lock, so no other
        writer can slip in between them.
        """
        with self._write_lock:
            if not accept(self._items):
                return False
            self._items = (*self._items, item)
            return True

    def remove_where(self, predicate: Callable[[T], bool]) -> int:
        """Drop every item matching *predicate*; return how many were dropped."""
        with self._write_lock:
            kept = tuple(item for item in self._items if not predicate(item))
            removed = len(self._items) - len(kept)
            if removed:
                self._items = kept
            return removed

    def replace_first(self, predicate: Callable[[T], bool], transform: Callable[[T], T]) -> bool:
        """Swap the first item matching *predicate* for ``transform(item)``.

        Returns False (and publishes nothing) when no item matches.
        """
        with self._write_lock:
            for index, item in enumerate(self._items):
                if predicate(item):
                    updated = list(self._items)
                    updated[index] = transform(item)
                    self._items = tuple(updated)
                    return True
            return False

    def clear(self) -> None:
        with self._write_lock:
            self._items = ()
