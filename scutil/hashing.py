"""Hash functions used by the open-addressing hash maps."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_M = 0xC6A4A7935BD1E995


def murmurhash(key: str | bytes) -> int:
    """64-bit MurmurHash (variant 64A, seed zero) folded to its low 32 bits."""
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    length = len(data)
    h = (length * _M) & _MASK64

    full = length & ~7
    for start in range(0, full, 8):
        k = int.from_bytes(data[start:start + 8], "little")
        k = (k * _M) & _MASK64
        k ^= k >> 47
        k = (k * _M) & _MASK64
        h ^= k
        h = (h * _M) & _MASK64

    tail = data[full:]
    if tail:
        h ^= int.from_bytes(tail, "little")
        h = (h * _M) & _MASK64

    h ^= h >> 47
    h = (h * _M) & _MASK64
    h ^= h >> 47

    return h & _MASK32


def hash_32(value: int) -> int:
    """Identity hash for 32-bit keys."""
    return value & _MASK32


def hash_64(value: int) -> int:
    """Fold a 64-bit key into 32 bits by xoring its two halves."""
    value &= _MASK64
    return (value & _MASK32) ^ (value >> 32)