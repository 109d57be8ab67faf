"""Open-addressing hash map with linear probing and backward-shift deletion."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any

from scutil.hashing import hash_64, murmurhash

MAX_CAPACITY = 0xFFFFFFFF
DEFAULT_LOAD_FACTOR = 75
MIN_LOAD_FACTOR = 25
MAX_LOAD_FACTOR = 95

_MIN_TABLE = 8


class HashMap:
    """Hash map whose table size is always a power of two.

    The "null" key (``None`` here) never occupies a table slot; it is kept
    aside and is yielded first when iterating. ``put``, ``get`` and ``delete``
    return the value the operation found, or the missing value when nothing
    was found; :meth:`found` tells which of the two happened.
    """

    _null_key: Any = None
    _missing: Any = None

    def __init__(self, capacity: int = 0, load_factor: int = 0) -> None:
        factor = DEFAULT_LOAD_FACTOR if load_factor == 0 else load_factor
        if not MIN_LOAD_FACTOR <= factor <= MAX_LOAD_FACTOR:
            raise ValueError(
                f"load factor must be between {MIN_LOAD_FACTOR} and "
                f"{MAX_LOAD_FACTOR}, got {load_factor}"
            )
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")

        self._load_factor = factor
        self._size = 0
        self._found = False
        self._null_used = False
        self._null_value: Any = self._missing

        if capacity == 0:
            # An empty table that grows on the first insertion.
            self._slots: list[tuple[Any, Any, int] | None] = [None]
            self._remap = 0
        else:
            self._set_table(self._next_capacity(capacity, 1))

    # -- internals ---------------------------------------------------------

    def _hash_key(self, key: Any) -> int:
        if isinstance(key, (str, bytes)):
            return murmurhash(key)
        if isinstance(key, int):
            return hash_64(key)
        raise TypeError(f"unsupported key type: {type(key).__name__}")

    def _is_null(self, key: Any) -> bool:
        if self._null_key is None:
            return key is None
        return key is not None and key == self._null_key

    @staticmethod
    def _next_capacity(capacity: int, factor: int) -> int:
        if capacity > MAX_CAPACITY // factor:
            raise MemoryError("hash map capacity limit reached")
        wanted = _MIN_TABLE if capacity < _MIN_TABLE else capacity * factor
        size = 1 << (wanted - 1).bit_length()
        if size > MAX_CAPACITY:
            raise MemoryError("hash map capacity limit reached")
        return size

    def _set_table(self, capacity: int) -> None:
        self._slots = [None] * capacity
        self._remap = int(capacity * (self._load_factor / 100))

    def _grow_if_needed(self) -> None:
        if self._size < self._remap:
            return
        old = self._slots
        self._set_table(self._next_capacity(len(old), 2))
        mod = len(self._slots) - 1
        for entry in old:
            if entry is None:
                continue
            pos = entry[2] & mod
            while self._slots[pos] is not None:
                pos = (pos + 1) & mod
            self._slots[pos] = entry

    def _locate(self, key: Hashable, h: int) -> int:
        """Return the slot holding ``key`` or the empty slot ending its probe."""
        mod = len(self._slots) - 1
        pos = h & mod
        while True:
            entry = self._slots[pos]
            if entry is None or (entry[2] == h and entry[0] == key):
                return pos
            pos = (pos + 1) & mod

    # -- public interface --------------------------------------------------

    def put(self, key: Any, value: Any) -> Any:
        """Store ``value`` under ``key``; return the value it replaced."""
        self._found = False
        self._grow_if_needed()

        if self._is_null(key):
            previous = self._null_value if self._null_used else self._missing
            self._found = self._null_used
            if not self._null_used:
                self._size += 1
            self._null_used = True
            self._null_value = value
            return previous

        h = self._hash_key(key)
        pos = self._locate(key, h)
        entry = self._slots[pos]
        if entry is None:
            self._size += 1
            self._found = False
            previous = self._missing
        else:
            self._found = True
            previous = entry[1]
        self._slots[pos] = (key, value, h)
        return previous

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or the missing value."""
        if self._is_null(key):
            self._found = self._null_used
            return self._null_value if self._null_used else self._missing

        h = self._hash_key(key)
        entry = self._slots[self._locate(key, h)]
        if entry is None:
            self._found = False
            return self._missing
        self._found = True
        return entry[1]

    def delete(self, key: Any) -> Any:
        """Remove ``key``; return the value it held, or the missing value."""
        if self._is_null(key):
            self._found = self._null_used
            if not self._null_used:
                return self._missing
            self._size -= 1
            self._null_used = False
            value, self._null_value = self._null_value, self._missing
            return value

        h = self._hash_key(key)
        slots = self._slots
        mod = len(slots) - 1
        pos = self._locate(key, h)
        entry = slots[pos]
        if entry is None:
            self._found = False
            return self._missing

        self._found = True
        self._size -= 1
        slots[pos] = None

        prev = pos
        it = pos
        while True:
            it = (it + 1) & mod
            moving = slots[it]
            if moving is None:
                break
            home = moving[2] & mod
            if (home > it and (home <= prev or it >= prev)) or (
                home <= prev and it >= prev
            ):
                slots[prev] = moving
                slots[it] = None
                prev = it

        return entry[1]

    def clear(self) -> None:
        """Remove every entry, keeping the current table size."""
        if self._size > 0:
            self._slots = [None] * len(self._slots)
            self._null_used = False
            self._null_value = self._missing
            self._size = 0

    def found(self) -> bool:
        """Whether the last put, get or delete found an existing key."""
        return self._found

    def capacity(self) -> int:
        """Number of slots in the table."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs, the null key first if present."""
        if self._null_used:
            yield self._null_key, self._null_value
        for entry in self._slots:
            if entry is not None:
                yield entry[0], entry[1]

    def keys(self) -> Iterator[Any]:
        """Yield every key, the null key first if present."""
        for key, _ in self.items():
            yield key

    def values(self) -> Iterator[Any]:
        """Yield every value in the same order as :meth:`keys`."""
        for _, value in self.items():
            yield value

    def __iter__(self) -> Iterator[Any]:
        return self.keys()