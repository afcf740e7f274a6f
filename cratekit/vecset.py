"""A set kept as a sorted list without duplicates."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator
import typing as t

T = t.TypeVar("T")


class VecSet(t.Generic[T]):
    """Ordered set backed by a sorted list; lookups use binary search."""

    __slots__ = ("_items",)

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        items: list[T] = []
        if iterable is not None:
            for item in sorted(iterable):
                if not items or items[-1] != item:
                    items.append(item)
        self._items = items

    @classmethod
    def from_single(cls, val: T) -> VecSet[T]:
        """A set holding exactly ``val``."""
        result = cls()
        result._items.append(val)
        return result

    @classmethod
    def _from_sorted(cls, items: list[T]) -> VecSet[T]:
        result = cls()
        result._items = items
        return result

    def _search(self, val: T) -> tuple[bool, int]:
        idx = bisect_left(self._items, val)
        found = idx < len(self._items) and self._items[idx] == val
        return found, idx

    def contains(self, val: T) -> bool:
        return self._search(val)[0]

    def insert(self, val: T) -> T | None:
        """Insert ``val``; return the equal element it replaced, if any."""
        found, idx = self._search(val)
        if found:
            previous = self._items[idx]
            self._items[idx] = val
            return previous
        self._items.insert(idx, val)
        return None

    def remove(self, val: T) -> T | None:
        """Remove and return the element equal to ``val``, or ``None``."""
        found, idx = self._search(val)
        if found:
            return self._items.pop(idx)
        return None

    @staticmethod
    def _merge_union(lhs: list[T], rhs: list[T]) -> list[T]:
        out: list[T] = []
        i = j = 0
        while i < len(lhs) and j < len(rhs):
            a, b = lhs[i], rhs[j]
            if a < b:
                out.append(a)
                i += 1
            elif b < a:
                out.append(b)
                j += 1
            else:
                out.append(a)
                i += 1
                j += 1
        out.extend(lhs[i:])
        out.extend(rhs[j:])
        return out

    def union_inplace(self, other: VecSet[T]) -> None:
        self._items = self._merge_union(self._items, other._items)

    def union(self, other: VecSet[T]) -> VecSet[T]:
        return self._from_sorted(self._merge_union(self._items, other._items))

    def intersection(self, other: VecSet[T]) -> VecSet[T]:
        lhs, rhs = self._items, other._items
        out: list[T] = []
        i = j = 0
        while i < len(lhs) and j < len(rhs):
            a, b = lhs[i], rhs[j]
            if a < b:
                i += 1
            elif b < a:
                j += 1
            else:
                out.append(a)
                i += 1
                j += 1
        return self._from_sorted(out)

    def difference_inplace(self, other: VecSet[T]) -> None:
        lhs, rhs = self._items, other._items
        out: list[T] = []
        i = j = 0
        while i < len(lhs) and j < len(rhs):
            a, b = lhs[i], rhs[j]
            if a < b:
                out.append(a)
                i += 1
            elif b < a:
                j += 1
            else:
                i += 1
                j += 1
        out.extend(lhs[i:])
        self._items = out

    def as_list(self) -> list[T]:
        """A copy of the elements in ascending order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, val: object) -> bool:
        try:
            return self._search(t.cast(T, val))[0]
        except TypeError:
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VecSet):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(tuple(self._items))

    def __repr__(self) -> str:
        return "{" + ", ".join(repr(x) for x in self._items) + "}"