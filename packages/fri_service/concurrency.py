import threading
from contextlib import contextmanager
from typing import Dict


class ConcurrencyManager:
    """
    Guards state-changing operations (commands) on a session.
    Enforces FAIL-FAST policy: if the session is locked, immediately raise.
    """
    def __init__(self):
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, resource_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(resource_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[resource_id] = lock
            return lock

    @contextmanager
    def acquire_lock(self, resource_id: str):
        lock = self._lock_for(resource_id)
        if not lock.acquire(blocking=False):
            raise BlockingIOError(f"Resource {resource_id} is currently locked by another request.")
        try:
            yield
        finally:
            lock.release()

    def discard(self, resource_id: str):
        """
        Drop the lock of a resource that takes no more commands (completed session).
        A lock that is currently held is kept.
        """
        with self._registry_lock:
            lock = self._locks.get(resource_id)
            if lock is not None and not lock.locked():
                del self._locks[resource_id]

    @property
    def lock_count(self) -> int:
        return len(self._locks)
