"""Memory-mapped files opened with explicit open, protection and map flags."""

from __future__ import annotations

import errno
import mmap
import os
from typing import Any

PROT_READ: int = getattr(mmap, "PROT_READ", 1)
PROT_WRITE: int = getattr(mmap, "PROT_WRITE", 2)
MAP_SHARED: int = getattr(mmap, "MAP_SHARED", 1)
MAP_PRIVATE: int = getattr(mmap, "MAP_PRIVATE", 2)

_FILE_MODE = 0o644
_WINDOWS = os.name == "nt"


class MemoryMap:
    """A file mapped into memory.

    If ``prot`` includes :data:`PROT_WRITE`, the file is extended so that it
    covers ``offset + length`` bytes. A ``length`` of zero maps the file from
    ``offset`` to its end. Failures raise :class:`OSError`.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        file_flags: int = os.O_RDWR | os.O_CREAT,
        prot: int = PROT_READ | PROT_WRITE,
        map_flags: int = MAP_SHARED,
        offset: int = 0,
        length: int = 0,
    ) -> None:
        if offset < 0 or length < 0:
            raise ValueError("offset and length must not be negative")

        self._page_size = mmap.PAGESIZE
        self._map: mmap.mmap | None = None
        self._fd = os.open(path, file_flags | getattr(os, "O_BINARY", 0), _FILE_MODE)
        try:
            size = os.fstat(self._fd).st_size
            if length == 0:
                length = size - offset
            if length <= 0:
                raise OSError(errno.EINVAL, "nothing to map past the given offset")

            writable = bool(prot & PROT_WRITE)
            if writable:
                self._reserve(size, offset, length)

            if _WINDOWS:
                access = mmap.ACCESS_WRITE if writable else mmap.ACCESS_READ
                self._map = mmap.mmap(self._fd, length, access=access, offset=offset)
            else:
                self._map = mmap.mmap(
                    self._fd, length, flags=map_flags, prot=prot, offset=offset
                )
        except BaseException:
            os.close(self._fd)
            self._fd = -1
            raise

    def _reserve(self, size: int, offset: int, length: int) -> None:
        if hasattr(os, "posix_fallocate"):
            os.posix_fallocate(self._fd, offset, length)
        elif size < offset + length:
            os.ftruncate(self._fd, offset + length)

    def _mapping(self) -> mmap.mmap:
        if self._map is None:
            raise ValueError("memory map is closed")
        return self._map

    @property
    def closed(self) -> bool:
        return self._map is None

    @property
    def page_size(self) -> int:
        """Operating system page size."""
        return self._page_size

    def msync(self, offset: int = 0, length: int | None = None) -> None:
        """Flush ``length`` bytes starting at the page that holds ``offset``."""
        mapping = self._mapping()
        start = offset & ~(self._page_size - 1)
        available = len(mapping) - start
        if length is None or length > available:
            length = available
        if length > 0:
            mapping.flush(start, length)

    def close(self) -> None:
        """Unmap and close the file; closing twice is harmless."""
        if self._map is None:
            return
        mapping, self._map = self._map, None
        fd, self._fd = self._fd, -1
        try:
            mapping.close()
        finally:
            os.close(fd)

    def __len__(self) -> int:
        return len(self._mapping())

    def __getitem__(self, index: int | slice) -> Any:
        return self._mapping()[index]

    def __setitem__(self, index: int | slice, value: Any) -> None:
        self._mapping()[index] = value

    def __enter__(self) -> MemoryMap:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()