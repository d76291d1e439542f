# app/services/clock.py
"""Logical clock handed to the registry as current_time (a block-height style counter)."""

import threading


class BlockClock:
    def __init__(self, height: int = 0):
        self._height = height
        self._lock = threading.Lock()

    @property
    def height(self) -> int:
        return self._height

    def advance(self) -> int:
        """Move to the next height and return it. Called once per mutating request."""
        with self._lock:
            self._height += 1
            return self._height
