"""Per-row exclusive access for inventory mutations.

- One lock per (product_id, warehouse_code) key, created on first use
- Multi-key holds acquire in sorted key order so two transfers touching
  the same pair of rows cannot deadlock
- Locks are released on every exit path
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)

RowKey = tuple[str, str]


class RowLocks:
    """Registry of row locks shared by every mutating component."""

    def __init__(self) -> None:
        self._locks: dict[RowKey, threading.Lock] = {}
        self._master_lock = threading.Lock()

    def _lock_for(self, key: RowKey) -> threading.Lock:
        with self._master_lock:
            if key not in self._locks:
                self._locks[key] = threading.Lock()
            return self._locks[key]

    @contextmanager
    def hold(self, *keys: RowKey) -> Iterator[None]:
        """Hold every given row key for the duration of the block."""
        ordered = sorted(set(keys))
        acquired: list[threading.Lock] = []
        try:
            for key in ordered:
                lock = self._lock_for(key)
                lock.acquire()
                acquired.append(lock)
                logger.debug("Row lock acquired: %s/%s", key[0], key[1])
            yield
        finally:
            for lock in reversed(acquired):
                lock.release()
            if acquired:
                logger.debug("Row locks released: %s", ordered)

    def is_locked(self, key: RowKey) -> bool:
        with self._master_lock:
            lock = self._locks.get(key)
        return lock is not None and lock.locked()
