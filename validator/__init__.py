"""
validator — walidacja zgodności przykładów zadania.

Interfejs publiczny:
    check_compatibility(task)          — wszystkie pary, fail-fast
    check_pair(task, first, second)    — jedna para (indeksy 0-based)

Typowe użycie:
    from validator import check_compatibility
    from data_model import IncompatibleError

    try:
        check_compatibility(task)
    except IncompatibleError as e:
        print(e.code, e.condition, e.first, e.second)
"""

from .compatibility import check_compatibility, check_pair

__all__ = [
    "check_compatibility",
    "check_pair",
]
