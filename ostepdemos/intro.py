"""Introductory demos: CPU and memory virtualisation, concurrency and persistence."""

import itertools
import mmap
import os
import re
import sys
import threading

from .timing import spin

__all__ = ["cpu", "mem", "threads_counter", "write_hello", "address_space", "main"]

_HEAP_BYTES = 100_000_000


def _atoi(text):
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _ticks(iterations):
    return itertools.count() if iterations is None else range(iterations)


def cpu(text, iterations=None, out=None):
    """Print ``text`` and busy-wait a second, ``iterations`` times or forever."""
    out = sys.stdout if out is None else out
    for _ in _ticks(iterations):
        print(text, file=out)
        spin(1)


def mem(value, iterations=None, out=None):
    """Keep a value in a heap cell and bump it once a second; return its last value."""
    out = sys.stdout if out is None else out
    pid = os.getpid()
    cell = [value]
    print(f"({pid}) addr pointed to by p: {id(cell):#x}", file=out)
    for _ in _ticks(iterations):
        spin(1)
        cell[0] += 1
        print(f"({pid}) value of p: {cell[0]}", file=out)
    return cell[0]


def threads_counter(loops):
    """Have two threads each increment a shared counter ``loops`` times, unlocked."""
    counter = 0

    def worker():
        nonlocal counter
        for _ in range(loops):
            counter += 1

    workers = [threading.Thread(target=worker) for _ in range(2)]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()
    return counter


def write_hello(path="/tmp/file"):
    """Write "hello world" to ``path``, force it to disk, and return the bytes written."""
    data = b"hello world\n"
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    try:
        written = os.write(fd, data)
        if written != len(data):
            raise OSError(f"short write: {written} of {len(data)} bytes")
        os.fsync(fd)
    finally:
        os.close(fd)
    return written


def address_space():
    """Identities of a code object, a large heap allocation and a local object."""
    local = [3]
    with mmap.mmap(-1, _HEAP_BYTES) as heap:
        heap_id = id(heap)
    return {
        "code": id(address_space.__code__),
        "heap": heap_id,
        "stack": id(local),
    }


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("usage: intro {cpu|mem|threads|io|va} ...", file=sys.stderr)
        return 1
    name, rest = args[0], args[1:]
    if name == "cpu":
        if len(rest) != 1:
            print("usage: cpu <string>", file=sys.stderr)
            return 1
        cpu(rest[0])
    elif name == "mem":
        if len(rest) != 1:
            print("usage: mem <value>", file=sys.stderr)
            return 1
        mem(_atoi(rest[0]))
    elif name == "threads":
        if len(rest) != 1:
            print("usage: threads <loops>", file=sys.stderr)
            return 1
        print("Initial value : 0")
        print(f"Final value   : {threads_counter(_atoi(rest[0]))}")
    elif name == "io":
        write_hello()
    elif name == "va":
        places = address_space()
        print(f"location of code : {places['code']:#x}")
        print(f"location of heap : {places['heap']:#x}")
        print(f"location of stack: {places['stack']:#x}")
    else:
        print("usage: intro {cpu|mem|threads|io|va} ...", file=sys.stderr)
        return 1
    return 0