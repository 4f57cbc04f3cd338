"""Helpers for slicing, grouping and de-duplicating sequences."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, MutableSequence, NamedTuple, Sequence


class Pair(NamedTuple):
    """Two values kept together."""

    first: Any
    second: Any


def sliding_window(items: Sequence, size: int) -> list:
    """All consecutive windows of ``size``; a short input is its own only window."""
    if len(items) <= size:
        return [items]
    return [items[start:start + size] for start in range(len(items) - size + 1)]


def combine(groups: Iterable, func: Callable) -> list:
    """Reduce each group to one value with ``func``."""
    return [func(group) for group in groups]


def slice_map(items: Sequence, func: Callable) -> Sequence:
    """Apply ``func`` to every item; an empty input is returned as is."""
    if not items:
        return items
    return [func(item) for item in items]


def chunk_slice(items: Sequence, size: int) -> list:
    """Split into chunks of ``size``; the last one may be shorter."""
    if size <= 0:
        raise ValueError("chunk size must be positive")
    return [items[start:start + size] for start in range(0, len(items), size)]


def split_slice(items: Iterable, sep: Any) -> list[list]:
    """Split at every ``sep``; an empty group before a separator is an error."""
    groups: list[list] = []
    index = 0
    for item in items:
        if item == sep:
            index += 1
            continue
        if len(groups) < index:
            raise ValueError("separator does not follow a non-empty group")
        if len(groups) == index:
            groups.append([])
        groups[index].append(item)
    return groups


def insert_unique(items: MutableSequence, elem: Any) -> None:
    """Append ``elem`` unless it is already present."""
    if elem not in items:
        items.append(elem)


def remove_dups(items: Iterable[Hashable]) -> list:
    """Drop repeated items, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))


def intersection(first: Iterable[Hashable], second: Iterable[Hashable]) -> list:
    """Items of ``second`` also in ``first``, once each, in the order of ``second``."""
    present = set(first)
    return remove_dups(item for item in second if item in present)


def reverse(items: MutableSequence) -> None:
    """Reverse ``items`` in place."""
    items.reverse()