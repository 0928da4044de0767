"""Higher-Order Pipeline.

Generic sequence operations that take functions as arguments. All operations
are eager, return new lists and never modify their input.

- `map_seq`: apply a function to each element (same length, same order).
- `filter_seq`: keep the elements a predicate accepts (relative order kept).
- `reduce_seq`: left fold, applied strictly in sequence order.
- `flatten`: concatenate one level of nested sequences.
- `flat_map`: map then flatten.
- `compact`: drop `None` elements.
- `sort_by`: stable merge sort driven by a caller-supplied predicate.

`Pipeline` chains the same operations, stage by stage.


File: pipeline.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


def map_seq(seq: Iterable[T], f: Callable[[T], U]) -> list[U]:
    result: list[U] = []
    for item in seq:
        result.append(f(item))
    return result


def filter_seq(seq: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    result: list[T] = []
    for item in seq:
        if predicate(item):
            result.append(item)
    return result


def reduce_seq(seq: Iterable[T], initial: R, combine: Callable[[R, T], R]) -> R:
    """
    Fold a sequence from the left.

    Args:
        seq: Elements to combine, in order.
        initial: Starting accumulator, returned as-is for an empty sequence.
        combine: Called as `combine(accumulator, element)`.

    Returns:
        The final accumulator.
    """
    acc = initial
    for item in seq:
        acc = combine(acc, item)
    return acc


def flatten(seqs: Iterable[Iterable[T]]) -> list[T]:
    """
    Concatenate the inner sequences, outer order first. Only one level is
    removed; deeper nesting is left as it is.
    """
    result: list[T] = []
    for inner in seqs:
        result.extend(inner)
    return result


def flat_map(seq: Iterable[T], f: Callable[[T], Iterable[U]]) -> list[U]:
    return flatten(map_seq(seq, f))


def compact(seq: Iterable[T | None]) -> list[T]:
    return filter_seq(seq, lambda item: item is not None)  # type: ignore[return-value]


def sort_by(seq: Iterable[T], before: Callable[[T, T], bool]) -> list[T]:
    """
    Sort with a caller-supplied ordering predicate.

    `before(a, b)` must return True when `a` strictly sorts before `b`.
    Elements for which neither sorts before the other keep their input order.

    Args:
        seq: Elements to sort.
        before: Strict total-order predicate.

    Returns:
        list: A new, sorted list.
    """
    items = list(seq)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    left = sort_by(items[:mid], before)
    right = sort_by(items[mid:], before)

    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # Take from the right only when it strictly precedes, so ties favour
        # the left half and the sort stays stable.
        if before(right[j], left[i]):
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


class Pipeline:
    """Eager chain of higher-order operations."""

    def __init__(self, seq: Iterable = ()):
        self._items = list(seq)

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Pipeline({self._items!r})"

    def map(self, f: Callable) -> Pipeline:
        return Pipeline(map_seq(self._items, f))

    def filter(self, predicate: Callable) -> Pipeline:
        return Pipeline(filter_seq(self._items, predicate))

    def flatten(self) -> Pipeline:
        return Pipeline(flatten(self._items))

    def flat_map(self, f: Callable) -> Pipeline:
        return Pipeline(flat_map(self._items, f))

    def compact(self) -> Pipeline:
        return Pipeline(compact(self._items))

    def sort_by(self, before: Callable) -> Pipeline:
        return Pipeline(sort_by(self._items, before))

    def reduce(self, initial, combine: Callable):
        return reduce_seq(self._items, initial, combine)

    def to_list(self) -> list:
        return list(self._items)
