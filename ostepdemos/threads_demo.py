"""Creating threads, passing them arguments and collecting what they return."""

import re
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from types import SimpleNamespace

__all__ = [
    "MyArg",
    "MyRet",
    "thread_create",
    "thread_create_simple_args",
    "thread_create_with_return_args",
    "run_t0",
    "run_t1",
    "main",
]


def _atoi(text):
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


@dataclass
class MyArg:
    a: int
    b: int


@dataclass
class MyRet:
    x: int
    y: int


def _run_in_thread(target, *args):
    """Run ``target`` in a new thread, wait for it and return its result."""
    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(target, *args).result()


def thread_create(args=None, out=None):
    """Hand a pair of numbers to a thread that prints them, then wait for it."""
    out = sys.stdout if out is None else out
    args = MyArg(10, 20) if args is None else args

    def mythread(arg):
        print(f"{arg.a} {arg.b}", file=out)

    _run_in_thread(mythread, args)
    print("done", file=out)


def thread_create_simple_args(value=100, out=None):
    """Pass a number to a thread that prints it and returns it plus one."""
    out = sys.stdout if out is None else out

    def mythread(arg):
        print(arg, file=out)
        return arg + 1

    rvalue = _run_in_thread(mythread, value)
    print(f"returned {rvalue}", file=out)
    return rvalue


def thread_create_with_return_args(args=None, out=None):
    """Pass a structure to a thread and collect the structure it returns."""
    out = sys.stdout if out is None else out
    args = MyArg(10, 20) if args is None else args

    def mythread(arg):
        print(f"args {arg.a} {arg.b}", file=out)
        return MyRet(1, 2)

    rvals = _run_in_thread(mythread, args)
    print(f"returned {rvals.x} {rvals.y}", file=out)
    return rvals


def run_t0(out=None):
    """Start two threads that each print a letter, and wait for both."""
    out = sys.stdout if out is None else out

    def mythread(letter):
        print(letter, file=out)

    print("main: begin", file=out)
    workers = [threading.Thread(target=mythread, args=(letter,)) for letter in "AB"]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    print("main: end", file=out)


def run_t1(loops, out=None):
    """Have two threads each add one to a shared counter ``loops`` times, unlocked."""
    out = sys.stdout if out is None else out
    shared = SimpleNamespace(counter=0)

    def mythread(letter):
        private = object()
        print(f"{letter}: begin [addr of i: {id(private):#x}]", file=out)
        for _ in range(loops):
            shared.counter = shared.counter + 1
        print(f"{letter}: done", file=out)

    print(f"main: begin [counter = {shared.counter}] [{id(shared):x}]", file=out)
    workers = [threading.Thread(target=mythread, args=(letter,)) for letter in "AB"]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    print(f"main: done\n [counter: {shared.counter}]\n [should: {loops * 2}]", file=out)
    return shared.counter


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    usage = "usage: threads_demo {create|simple_args|return_args|t0|t1 <loopcount>}"
    if not args:
        print(usage, file=sys.stderr)
        return 1
    name, rest = args[0], args[1:]
    simple = {
        "create": thread_create,
        "simple_args": thread_create_simple_args,
        "return_args": thread_create_with_return_args,
        "t0": run_t0,
    }
    if name in simple and not rest:
        simple[name]()
    elif name == "t1":
        if len(rest) != 1:
            print("usage: main-first <loopcount>", file=sys.stderr)
            return 1
        run_t1(_atoi(rest[0]))
    else:
        print(usage, file=sys.stderr)
        return 1
    return 0