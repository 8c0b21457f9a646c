"""Shared request counter."""

import logging
import threading

logger = logging.getLogger(__name__)

class RequestCounter:
    """Monotonic count of dispatched tool requests, shared by all handlers."""

    def __init__(self):
        self._count = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one request and return the new total."""
        with self._lock:
            self._count += 1
            count = self._count
        logger.debug(f"Request count incremented to: {count}")
        return count

    @property
    def value(self) -> int:
        with self._lock:
            return self._count
