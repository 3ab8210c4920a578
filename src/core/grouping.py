"""Ordered group-by shared by the aggregation stages."""

from __future__ import annotations

from typing import Callable, Dict, Hashable, Iterable, Tuple, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def group_by(items: Iterable[T], key: Callable[[T], K]) -> Dict[K, Tuple[T, ...]]:
    """Group items by key.

    Keys appear in order of first occurrence and each group keeps the input
    order of its members, so "first of group" means first in the input.
    """

    groups: Dict[K, list] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return {group_key: tuple(members) for group_key, members in groups.items()}
