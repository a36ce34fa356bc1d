"""
repositories/grouping_index.py
-------------------------------
Read-only multimap derived from a snapshot of another collection.

The index is NOT kept in sync with its source. After adding or removing
records in the source, the owner must call ``build()`` again; reads in
between see the old grouping.
"""

from typing import Callable, Generic, Hashable, Iterable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class GroupingIndex(Generic[K, V]):
    """Groups records by a key function, preserving source order in each group."""

    def __init__(self):
        self._groups: dict[K, tuple[V, ...]] = {}
        self._built = False

    def build(self, source: Iterable[V], key_of: Callable[[V], K]) -> None:
        """
        Scan ``source`` and replace the current grouping.

        The new mapping is assembled completely before it is swapped in.
        """
        staging: dict[K, list[V]] = {}
        for item in source:
            staging.setdefault(key_of(item), []).append(item)
        self._groups = {key: tuple(items) for key, items in staging.items()}
        self._built = True

    def lookup(self, key: K) -> list[V]:
        """Records grouped under ``key``; empty if there are none."""
        return list(self._groups.get(key, ()))

    @property
    def is_built(self) -> bool:
        return self._built

    def keys(self) -> list[K]:
        return list(self._groups)

    def __len__(self) -> int:
        return len(self._groups)
