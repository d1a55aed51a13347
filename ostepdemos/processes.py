"""Process creation: fork, wait, exec and output redirection."""

import os
import sys

__all__ = ["hello_fork", "fork_exec", "fork_redirect", "main"]


def _flush():
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError):
            pass


def _fork():
    _flush()
    return os.fork()


def _run_child(body):
    """Run ``body`` in a forked child and leave the process with its status."""
    status = 1
    try:
        status = body()
    except BaseException:
        status = 1
    finally:
        _flush()
        os._exit(status)


def _exec(argv):
    _flush()
    try:
        os.execvp(argv[0], argv)
    except OSError:
        pass
    print("this shouldn't print out", end="")
    return 1


def _command(command):
    argv = [os.fspath(part) for part in command]
    if not argv:
        raise ValueError("empty command")
    return argv


def hello_fork(wait=False):
    """Fork a child that greets; return ``(child_pid, waited_pid or None)``."""
    print(f"hello world (pid:{os.getpid()})")
    pid = _fork()
    if pid == 0:
        def body():
            print(f"hello, I am child (pid:{os.getpid()})")
            return 0

        _run_child(body)
    if not wait:
        print(f"hello, I am parent of {pid} (pid:{os.getpid()})")
        return pid, None
    waited, _ = os.waitpid(pid, 0)
    print(f"hello, I am parent of {pid} (wc:{waited}) (pid:{os.getpid()})")
    return pid, waited


def fork_exec(command=("wc", "p3.c")):
    """Fork a child that runs ``command``; return ``(child_pid, exit_code)``."""
    argv = _command(command)
    print(f"hello world (pid:{os.getpid()})")
    pid = _fork()
    if pid == 0:
        def body():
            print(f"hello, I am child (pid:{os.getpid()})")
            return _exec(argv)

        _run_child(body)
    waited, status = os.waitpid(pid, 0)
    print(f"hello, I am parent of {pid} (wc:{waited}) (pid:{os.getpid()})")
    return pid, os.waitstatus_to_exitcode(status)


def fork_redirect(command=("wc", "p4.c"), output_path="./p4.output"):
    """Run ``command`` in a child whose standard output goes to ``output_path``."""
    argv = _command(command)
    pid = _fork()
    if pid == 0:
        def body():
            fd = os.open(output_path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o700)
            os.dup2(fd, 1)
            if fd != 1:
                os.close(fd)
            return _exec(argv)

        _run_child(body)
    _, status = os.waitpid(pid, 0)
    return os.waitstatus_to_exitcode(status)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    usage = "usage: processes {p1|p2|p3 [file]|p4 [file]}"
    if not args or args[0] not in ("p1", "p2", "p3", "p4"):
        print(usage, file=sys.stderr)
        return 1
    name, rest = args[0], args[1:]
    if (name in ("p1", "p2") and rest) or len(rest) > 1:
        print(usage, file=sys.stderr)
        return 1
    try:
        if name == "p1":
            hello_fork(False)
        elif name == "p2":
            hello_fork(True)
        elif name == "p3":
            fork_exec(("wc", rest[0] if rest else "p3.c"))
        else:
            fork_redirect(("wc", rest[0] if rest else "p4.c"))
    except OSError:
        print("fork failed", file=sys.stderr)
        return 1
    return 0