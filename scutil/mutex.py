"""A plain, non-recursive mutual exclusion lock."""

from __future__ import annotations

import threading


class Mutex:
    """Non-recursive mutex; locking it twice from one thread deadlocks."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    def lock(self) -> None:
        """Block until the mutex is acquired."""
        if self._closed:
            raise RuntimeError("mutex is closed")
        self._lock.acquire()

    def unlock(self) -> None:
        """Release the mutex; raises RuntimeError if it is not held."""
        self._lock.release()

    def close(self) -> None:
        """Destroy the mutex; a held mutex cannot be destroyed."""
        if self._closed:
            return
        if self._lock.locked():
            raise RuntimeError("cannot close a locked mutex")
        self._closed = True

    def __enter__(self) -> Mutex:
        self.lock()
        return self

    def __exit__(self, *args: object) -> None:
        self.unlock()