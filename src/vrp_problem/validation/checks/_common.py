"""Helpers shared by validation checks."""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)


def find_duplicates(keys: Iterable[K]) -> List[Tuple[K, List[int]]]:
    """Find keys occurring more than once.

    Args:
        keys: Keys in input order.

    Returns:
        (key, positions) pairs for every key seen more than once, ordered by
        first occurrence. Each duplicated key is reported once.

    Examples:
        >>> find_duplicates(["a", "b", "a", "c", "b", "a"])
        [('a', [0, 2, 5]), ('b', [1, 4])]
    """
    positions: Dict[K, List[int]] = {}
    for index, key in enumerate(keys):
        positions.setdefault(key, []).append(index)

    return [(key, found) for key, found in positions.items() if len(found) > 1]


def format_window_path(owner_path: str, indices: Iterable[int]) -> Tuple[str, ...]:
    """Build document paths of time windows under an owner path."""
    return tuple(f"{owner_path}.times[{index}]" for index in indices)
