# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The one piece of shared mutable state in a parallel run.
"""

from threading import Lock


class SharedAccumulator:
    """A float total that many workers add into, one add at a time."""

    def __init__(self, initial: float = 0.0) -> None:
        self._lock = Lock()
        self._total = initial
        self._merges = 0

    def add(self, amount: float) -> None:
        with self._lock:
            self._total += amount
            self._merges += 1

    @property
    def total(self) -> float:
        with self._lock:
            return self._total

    @property
    def merges(self) -> int:
        """How many partial contributions have been merged so far."""
        with self._lock:
            return self._merges
