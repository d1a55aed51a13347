"""An integer cell with an atomic compare-and-swap operation."""

import sys
import threading

__all__ = ["AtomicInt", "main"]


class AtomicInt:
    """An integer whose compare-and-swap is performed atomically."""

    def __init__(self, value=0):
        self._value = value
        self._lock = threading.Lock()

    def compare_and_swap(self, old, new):
        """Set the value to ``new`` if it equals ``old``; return whether it did."""
        with self._lock:
            if self._value == old:
                self._value = new
                return True
            return False

    @property
    def value(self):
        with self._lock:
            return self._value


def main(argv=None):
    cell = AtomicInt(0)
    print(f"before successful cas: {cell.value}")
    success = cell.compare_and_swap(0, 100)
    print(f"after successful cas: {cell.value} (success: {int(success)})")
    print(f"before failing cas: {cell.value}")
    success = cell.compare_and_swap(0, 200)
    print(f"after failing cas: {cell.value} (old: {int(success)})")
    return 0