"""
repositories/linear_repo.py
----------------------------
Ordered repository searched by predicate.
Used by the finance and healthcare systems.
"""

from typing import Callable, Generic, Iterator, Optional, TypeVar

V = TypeVar("V")

Predicate = Callable[[V], bool]


class LinearRepository(Generic[V]):
    """
    Insertion-ordered sequence of records with first-match lookup.

    No uniqueness is enforced. A miss in ``find_first`` or ``remove_first``
    is a normal outcome, not an error: callers use them to check for
    existence.
    """

    def __init__(self):
        self._items: list[V] = []

    def add(self, value: V) -> None:
        """Append a record."""
        self._items.append(value)

    def find_first(self, predicate: Predicate) -> Optional[V]:
        """Return the first record matching ``predicate``, or None."""
        return next((item for item in self._items if predicate(item)), None)

    def remove_first(self, predicate: Predicate) -> bool:
        """
        Remove the first record matching ``predicate``.

        Returns:
            True if a record was removed, False if nothing matched.
        """
        for index, item in enumerate(self._items):
            if predicate(item):
                del self._items[index]
                return True
        return False

    def list_all(self) -> list[V]:
        """The live record list in insertion order."""
        return self._items

    def __iter__(self) -> Iterator[V]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
