"""A stack of integers kept in a memory-mapped file, so it persists between runs."""

import mmap
import os
import re
import struct
import sys

__all__ = ["PersistentStack", "create_image", "run_commands", "main"]

_COUNT = struct.Struct("=Q")
_ITEM = struct.Struct("=i")
DEFAULT_IMAGE = "ps.img"


def _atoi(text):
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def create_image(path, size=mmap.PAGESIZE):
    """Create (or reset) an empty backing file of ``size`` bytes."""
    with open(path, "wb") as handle:
        handle.truncate(size)


class PersistentStack:
    """A stack stored in a mapped file: an item count followed by 32-bit integers."""

    def __init__(self, path=DEFAULT_IMAGE):
        self._file = open(path, "r+b")
        try:
            size = os.fstat(self._file.fileno()).st_size
            if size < _COUNT.size or size % _ITEM.size != 0:
                raise ValueError(f"bad stack image size: {size}")
            self._map = mmap.mmap(self._file.fileno(), size)
        except BaseException:
            self._file.close()
            raise
        self._capacity = (size - _COUNT.size) // _ITEM.size
        if len(self) > self._capacity:
            self.close()
            raise ValueError("stack image holds an invalid item count")

    def __len__(self):
        return _COUNT.unpack_from(self._map, 0)[0]

    def _set_len(self, n):
        _COUNT.pack_into(self._map, 0, n)

    @property
    def capacity(self):
        return self._capacity

    def push(self, value):
        """Push ``value``; return False (and change nothing) if the stack is full."""
        n = len(self)
        if n >= self._capacity:
            return False
        try:
            _ITEM.pack_into(self._map, _COUNT.size + n * _ITEM.size, value)
        except struct.error as exc:
            raise ValueError(f"value out of range: {value}") from exc
        self._set_len(n + 1)
        return True

    def pop(self):
        """Pop and return the top value, or None if the stack is empty."""
        n = len(self)
        if n == 0:
            return None
        n -= 1
        self._set_len(n)
        return _ITEM.unpack_from(self._map, _COUNT.size + n * _ITEM.size)[0]

    def close(self):
        if not self._map.closed:
            self._map.flush()
            self._map.close()
        self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


def run_commands(stack, commands):
    """Apply push/"pop" commands in order; return the values popped."""
    popped = []
    for command in commands:
        if command == "pop":
            value = stack.pop()
            if value is not None:
                popped.append(value)
        else:
            stack.push(_atoi(command))
    return popped


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        with PersistentStack(DEFAULT_IMAGE) as stack:
            popped = run_commands(stack, args)
    except (OSError, ValueError) as exc:
        print(f"pstack: {exc}", file=sys.stderr)
        return 1
    for value in popped:
        print(value)
    return 0