"""Micro-benchmarks for system-call and context-switch cost."""

import os
import sys
import time

__all__ = ["time_null_reads", "time_pipe_switches", "main"]


def time_null_reads(path="test.txt", iterations=1_000_000):
    """Return the mean time, in microseconds, of a zero-byte read on ``path``."""
    if iterations <= 0:
        raise ValueError(f"iterations must be positive: {iterations}")
    fd = os.open(path, os.O_RDONLY | os.O_CREAT, 0o644)
    try:
        start = time.perf_counter()
        for _ in range(iterations):
            os.read(fd, 0)
        elapsed = time.perf_counter() - start
    finally:
        os.close(fd)
    return elapsed * 1e6 / iterations


def time_pipe_switches(iterations=1000):
    """Ping-pong a byte with a child over two pipes; return microseconds per round."""
    if iterations <= 0:
        raise ValueError(f"iterations must be positive: {iterations}")
    to_parent_r, to_parent_w = os.pipe()
    to_child_r, to_child_w = os.pipe()
    sys.stdout.flush()
    sys.stderr.flush()
    pid = os.fork()
    if pid == 0:
        status = 1
        try:
            os.close(to_parent_r)
            os.close(to_child_w)
            for _ in range(iterations):
                os.write(to_parent_w, b"x")
                if not os.read(to_child_r, 1):
                    break
            status = 0
        except BaseException:
            status = 1
        finally:
            os._exit(status)
    os.close(to_parent_w)
    os.close(to_child_r)
    try:
        start = time.perf_counter()
        for _ in range(iterations):
            if not os.read(to_parent_r, 1):
                raise OSError("child exited early")
            os.write(to_child_w, b"x")
        elapsed = time.perf_counter() - start
    finally:
        os.close(to_parent_r)
        os.close(to_child_w)
        os.waitpid(pid, 0)
    return elapsed * 1e6 / iterations


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    usage = "usage: benchmarks {reads [path] | switches}"
    if not args:
        print(usage, file=sys.stderr)
        return 1
    if args[0] == "reads" and len(args) <= 2:
        avg = time_null_reads(args[1] if len(args) == 2 else "test.txt")
        print(f"Average time per read: {avg:.3f} microseconds")
    elif args[0] == "switches" and len(args) == 1:
        avg = time_pipe_switches()
        print(
            "Time for two context switches and four system calls to execute: "
            f"{avg:.3f} microseconds"
        )
    else:
        print(usage, file=sys.stderr)
        return 1
    return 0