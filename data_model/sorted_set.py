"""
data_model/sorted_set.py — posortowany zbiór bez powtórzeń.

SortedSet trzyma elementy w posortowanej liście; wszystkie operacje
mnogościowe to pojedyncze scalanie (merge) dwóch posortowanych ciągów:

  union / intersection / difference   O(n + m), zwracają nowy zbiór
  is_subset / is_superset / is_disjoint   O(n + m), przerywają przy niezgodności

Równość, porządek i hash są strukturalne (po elementach), dzięki czemu
zbiory zbiorów deduplikują się po zawartości.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import total_ordering
from typing import Any


@total_ordering
class SortedSet[T]:
    """
    Posortowany, zdeduplikowany zbiór elementów z porządkiem liniowym.

    insert() dopisuje element na koniec bez sortowania; do czasu
    rebuild() kolejność (i wyniki operacji) nie są gwarantowane.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self.rebuild()

    @classmethod
    def _from_sorted(cls, items: list[T]) -> SortedSet[T]:
        # items są już posortowane i unikalne (wynik scalania)
        result = cls.__new__(cls)
        result._items = items
        return result

    def rebuild(self) -> None:
        """Sortuje i usuwa powtórzenia w miejscu."""
        self._items.sort()
        deduped: list[T] = []
        for item in self._items:
            if not deduped or deduped[-1] != item:
                deduped.append(item)
        self._items = deduped

    # ------------------------------------------------------------------
    # Operacje mnogościowe
    # ------------------------------------------------------------------

    def union(self, other: SortedSet[T]) -> SortedSet[T]:
        """self ∪ other"""
        a, b = self._items, other._items
        result: list[T] = []
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                result.append(a[i])
                i += 1
            elif b[j] < a[i]:
                result.append(b[j])
                j += 1
            else:
                result.append(a[i])
                i += 1
                j += 1
        result.extend(a[i:])
        result.extend(b[j:])
        return SortedSet._from_sorted(result)

    def intersection(self, other: SortedSet[T]) -> SortedSet[T]:
        """self ∩ other"""
        a, b = self._items, other._items
        result: list[T] = []
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                i += 1
            elif b[j] < a[i]:
                j += 1
            else:
                result.append(a[i])
                i += 1
                j += 1
        return SortedSet._from_sorted(result)

    def difference(self, other: SortedSet[T]) -> SortedSet[T]:
        """self − other"""
        a, b = self._items, other._items
        result: list[T] = []
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                result.append(a[i])
                i += 1
            elif b[j] < a[i]:
                j += 1
            else:
                i += 1
                j += 1
        result.extend(a[i:])
        return SortedSet._from_sorted(result)

    def is_subset(self, other: SortedSet[T]) -> bool:
        """self ⊆ other"""
        a, b = self._items, other._items
        if len(a) > len(b):
            return False
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                # a[i] nie występuje w b
                return False
            if b[j] < a[i]:
                j += 1
            else:
                i += 1
                j += 1
        return i == len(a)

    def is_superset(self, other: SortedSet[T]) -> bool:
        """self ⊇ other"""
        return other.is_subset(self)

    def is_disjoint(self, other: SortedSet[T]) -> bool:
        """self ∩ other = ∅"""
        a, b = self._items, other._items
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                i += 1
            elif b[j] < a[i]:
                j += 1
            else:
                return False
        return True

    # ------------------------------------------------------------------
    # Dostęp
    # ------------------------------------------------------------------

    def insert(self, item: T) -> None:
        self._items.append(item)

    def contains(self, item: T) -> bool:
        return item in self._items

    def is_empty(self) -> bool:
        return not self._items

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    # ------------------------------------------------------------------
    # Równość, porządek, hash: strukturalne
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SortedSet):
            return NotImplemented
        return self._items == other._items

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, SortedSet):
            return NotImplemented
        return self._items < other._items

    def __hash__(self) -> int:
        return hash(tuple(self._items))

    def __repr__(self) -> str:
        return f"SortedSet({self._items!r})"

    def __str__(self) -> str:
        return "{" + ", ".join(str(item) for item in self._items) + "}"
