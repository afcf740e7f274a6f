"""A map kept as a list of entries sorted by key."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterable, Iterator
from operator import itemgetter
import typing as t

K = t.TypeVar("K")
V = t.TypeVar("V")


class VecMap(t.Generic[K, V]):
    """Ordered map backed by sorted key and value lists; lookups use binary search."""

    __slots__ = ("_keys", "_values")

    def __init__(self, items: Iterable[tuple[K, V]] | None = None) -> None:
        keys: list[K] = []
        values: list[V] = []
        if items is not None:
            for key, value in sorted(items, key=itemgetter(0)):
                if keys and keys[-1] == key:
                    continue
                keys.append(key)
                values.append(value)
        self._keys = keys
        self._values = values

    @classmethod
    def from_single(cls, key: K, value: V) -> VecMap[K, V]:
        """A map holding exactly one entry."""
        result = cls()
        result._keys.append(key)
        result._values.append(value)
        return result

    def _search(self, key: K) -> tuple[bool, int]:
        idx = bisect_left(self._keys, key)
        return idx < len(self._keys) and self._keys[idx] == key, idx

    def contains_key(self, key: K) -> bool:
        return self._search(key)[0]

    def get(self, key: K) -> V | None:
        """The value stored under ``key``, or ``None``."""
        found, idx = self._search(key)
        return self._values[idx] if found else None

    def insert(self, key: K, value: V) -> V | None:
        """Store ``value`` under ``key``; return the value it replaced, if any."""
        found, idx = self._search(key)
        if found:
            previous = self._values[idx]
            self._values[idx] = value
            return previous
        self._keys.insert(idx, key)
        self._values.insert(idx, value)
        return None

    def remove(self, key: K) -> V | None:
        """Remove ``key`` and return its value, or ``None`` if it was absent."""
        found, idx = self._search(key)
        if not found:
            return None
        del self._keys[idx]
        return self._values.pop(idx)

    def entry(self, key: K) -> Entry[K, V]:
        """An entry for ``key``; it is only valid until the map is next changed
        by other means."""
        found, idx = self._search(key)
        if found:
            return OccupiedEntry(self, idx)
        return VacantEntry(self, idx, key)

    def merge_with(self, other: VecMap[K, V], f: Callable[[V, V], V]) -> None:
        """Merge ``other`` into this map; values of shared keys are combined
        with ``f(mine, theirs)``."""
        lk, lv = self._keys, self._values
        rk, rv = other._keys, other._values
        keys: list[K] = []
        values: list[V] = []
        i = j = 0
        while i < len(lk) and j < len(rk):
            a, b = lk[i], rk[j]
            if a < b:
                keys.append(a)
                values.append(lv[i])
                i += 1
            elif b < a:
                keys.append(b)
                values.append(rv[j])
                j += 1
            else:
                keys.append(a)
                values.append(f(lv[i], rv[j]))
                i += 1
                j += 1
        keys.extend(lk[i:])
        values.extend(lv[i:])
        keys.extend(rk[j:])
        values.extend(rv[j:])
        self._keys = keys
        self._values = values

    def remove_less_than(self, key: K) -> None:
        """Remove the entries whose keys are less than ``key``.

        Nothing is removed when every key is less than ``key``.
        """
        count = self._search(key)[1]
        if count == 0 or count >= len(self._keys):
            return
        del self._keys[:count]
        del self._values[:count]

    def remove_max(self) -> tuple[K, V] | None:
        """Remove and return the entry with the largest key, or ``None``."""
        if not self._keys:
            return None
        return self._keys.pop(), self._values.pop()

    def apply(self, keys: Iterable[K], f: Callable[[V], object]) -> None:
        """Call ``f`` on the value of every key in ``keys`` (ascending and
        unique, such as a :class:`~cratekit.vecset.VecSet`) that is present."""
        wanted = iter(keys)
        probe = next(wanted, _MISSING)
        i = 0
        while i < len(self._keys) and probe is not _MISSING:
            current = self._keys[i]
            if current < probe:
                i += 1
            elif probe < current:
                probe = next(wanted, _MISSING)
            else:
                f(self._values[i])
                i += 1
                probe = next(wanted, _MISSING)

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return zip(self._keys, self._values)

    def __contains__(self, key: object) -> bool:
        try:
            return self.contains_key(t.cast(K, key))
        except TypeError:
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VecMap):
            return NotImplemented
        return self._keys == other._keys and self._values == other._values

    def __hash__(self) -> int:
        return hash((tuple(self._keys), tuple(self._values)))

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self)
        return "{" + body + "}"


_MISSING: t.Any = object()


class Entry(t.Generic[K, V]):
    """A slot of a :class:`VecMap` for one key, present or not."""

    def __init__(self, map: VecMap[K, V], idx: int, key: K) -> None:
        self._map = map
        self._idx = idx
        self._key = key

    def key(self) -> K:
        return self._key

    def _resolve(self, make: Callable[[K], V]) -> V:
        raise NotImplementedError

    def and_modify(self, f: Callable[[V], V]) -> Entry[K, V]:
        """If the key is present, replace its value with ``f(value)``."""
        return self

    def or_default(self, factory: Callable[[], V]) -> V:
        return self._resolve(lambda _key: factory())

    def or_insert(self, default: V) -> V:
        return self._resolve(lambda _key: default)

    def or_insert_with(self, factory: Callable[[], V]) -> V:
        return self._resolve(lambda _key: factory())

    def or_insert_with_key(self, factory: Callable[[K], V]) -> V:
        return self._resolve(factory)


class VacantEntry(Entry[K, V]):
    """An entry whose key is not in the map."""

    def insert(self, value: V) -> V:
        self._map._keys.insert(self._idx, self._key)
        self._map._values.insert(self._idx, value)
        return value

    def _resolve(self, make: Callable[[K], V]) -> V:
        return self.insert(make(self._key))


class OccupiedEntry(Entry[K, V]):
    """An entry whose key is in the map."""

    def __init__(self, map: VecMap[K, V], idx: int) -> None:
        super().__init__(map, idx, map._keys[idx])

    def get(self) -> V:
        return self._map._values[self._idx]

    def insert(self, value: V) -> V:
        """Replace the value and return the previous one."""
        previous = self._map._values[self._idx]
        self._map._values[self._idx] = value
        return previous

    def remove(self) -> V:
        return self.remove_entry()[1]

    def remove_entry(self) -> tuple[K, V]:
        key = self._map._keys.pop(self._idx)
        value = self._map._values.pop(self._idx)
        return key, value

    def and_modify(self, f: Callable[[V], V]) -> Entry[K, V]:
        self.insert(f(self.get()))
        return self

    def _resolve(self, make: Callable[[K], V]) -> V:
        return self.get()