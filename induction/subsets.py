"""
induction/subsets.py — wyliczanie podzbiorów o zadanej liczności.

Koszt wyliczania wszystkich rozmiarów jest wykładniczy w len(items);
cała enumeracja syntezy przechodzi przez subsets_of_size.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def subsets_of_size[T](items: Sequence[T], k: int) -> Iterator[tuple[T, ...]]:
    """
    Wszystkie k-elementowe kombinacje items w porządku leksykograficznym
    indeksów (dla posortowanego items krotki są posortowane).

    k=0 daje jedną pustą krotkę; k > len(items) nie daje nic.
    """
    n = len(items)
    if k < 0 or k > n:
        return
    indices = list(range(k))
    while True:
        yield tuple(items[i] for i in indices)
        # najbardziej prawy indeks, który można jeszcze przesunąć
        pos = k - 1
        while pos >= 0 and indices[pos] == pos + n - k:
            pos -= 1
        if pos < 0:
            return
        indices[pos] += 1
        for j in range(pos + 1, k):
            indices[j] = indices[j - 1] + 1
