"""Common concurrency bugs: atomicity violations, ordering violations and deadlock."""

import contextlib
import sys
import threading
import time
from dataclasses import dataclass
from typing import Optional

__all__ = ["PR_STATE_INIT", "ProcInfo", "PRThread", "atomicity", "deadlock", "ordering", "main"]

PR_STATE_INIT = 0

_ATOMICITY_T2 = " " * 17
_DEADLOCK_T2 = " " * 27


@dataclass
class ProcInfo:
    pid: int


@dataclass
class _ThreadInfo:
    proc_info: Optional[ProcInfo]


class PRThread:
    """A thread record whose creator pauses for ``delay`` seconds after starting it."""

    def __init__(self, target, delay=1.0):
        self.state = PR_STATE_INIT
        self._thread = threading.Thread(target=target)
        self._thread.start()
        time.sleep(delay)

    def wait(self):
        self._thread.join()


def atomicity(fixed=False, check_delay=2.0, clear_delay=1.0, out=None):
    """One thread checks then uses a field while another clears it.

    Returns the pid the first thread used, or None if it found the field gone.
    With ``fixed`` the check and the use happen under one lock.
    """
    out = sys.stdout if out is None else out
    info = _ThreadInfo(ProcInfo(100))
    guard = threading.Lock() if fixed else contextlib.nullcontext()
    used = None

    def thread1():
        nonlocal used
        print("t1: before check", file=out)
        with guard:
            if info.proc_info is not None:
                print("t1: after check", file=out)
                time.sleep(check_delay)
                print("t1: use!", file=out)
                current = info.proc_info
                if current is None:
                    print("t1: proc_info is gone", file=out)
                else:
                    used = current.pid
                    print(current.pid, file=out)

    def thread2():
        print(f"{_ATOMICITY_T2}t2: begin", file=out)
        time.sleep(clear_delay)
        with guard:
            print(f"{_ATOMICITY_T2}t2: set to NULL", file=out)
            info.proc_info = None

    print("main: begin", file=out)
    workers = [threading.Thread(target=thread1), threading.Thread(target=thread2)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    print("main: end", file=out)
    return used


def deadlock(ordered=False, out=None, timeout=None):
    """Two threads take two locks, in opposite orders unless ``ordered``.

    Without a ``timeout`` a deadlock blocks forever; with one, a thread that
    cannot get a lock in time gives up. Returns True if both threads got both locks.
    """
    out = sys.stdout if out is None else out
    l1 = ("L1", threading.Lock())
    l2 = ("L2", threading.Lock())
    finished = []

    def worker(prefix, order):
        print(f"{prefix}begin", file=out)
        held = []
        try:
            for name, lock in order:
                print(f"{prefix}try to acquire {name}...", file=out)
                acquired = lock.acquire() if timeout is None else lock.acquire(timeout=timeout)
                if not acquired:
                    print(f"{prefix}gave up on {name}", file=out)
                    return
                held.append(lock)
                print(f"{prefix}{name} acquired", file=out)
            finished.append(prefix)
        finally:
            for lock in held:
                lock.release()

    second_order = (l1, l2) if ordered else (l2, l1)
    print("main: begin", file=out)
    workers = [
        threading.Thread(target=worker, args=("t1: ", (l1, l2))),
        threading.Thread(target=worker, args=(f"{_DEADLOCK_T2}t2: ", second_order)),
    ]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()
    print("main: end", file=out)
    return len(finished) == 2


def ordering(fixed=False, delay=1.0, out=None):
    """A new thread reads its own record, which its creator may not have stored yet.

    Returns the state the thread read, or None if the record was not there.
    With ``fixed`` the thread waits on a condition until the record is stored.
    """
    out = sys.stdout if out is None else out
    cond = threading.Condition()
    initialized = False
    m_thread = None
    observed = None

    def m_main():
        nonlocal observed
        print("mMain: begin", file=out)
        if fixed:
            with cond:
                while not initialized:
                    cond.wait()
        record = m_thread
        if record is None:
            print("mMain: thread structure is not initialized", file=out)
            return
        observed = record.state
        print(f"mMain: state is {observed}", file=out)

    print("ordering: begin", file=out)
    m_thread = PRThread(m_main, delay)
    if fixed:
        with cond:
            initialized = True
            cond.notify()
    m_thread.wait()
    print("ordering: end", file=out)
    return observed


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    commands = {
        "atomicity": lambda: atomicity(False),
        "atomicity_fixed": lambda: atomicity(True),
        "deadlock": lambda: deadlock(False),
        "ordering": lambda: ordering(False),
        "ordering_fixed": lambda: ordering(True),
    }
    if len(args) != 1 or args[0] not in commands:
        print("usage: bugs {" + "|".join(commands) + "}", file=sys.stderr)
        return 1
    commands[args[0]]()
    return 0