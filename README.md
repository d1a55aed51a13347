# ostepdemos

A collection of small, self-contained programs that show how an operating
system works from the point of view of a program running on it: creating
processes, lottery scheduling, threads and the bugs they invite,
compare-and-swap, a persistent memory-mapped stack, the cost of system
calls and context switches, and a tiny UDP client and server.

Each demonstration is both an importable function or class and a command
you can run from a shell. The process and benchmark demos use `fork`, so
they need a POSIX system.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command              | What it shows                                                       |
|----------------------|---------------------------------------------------------------------|
| `ostep-processes`    | `p1`, `p2`, `p3 [file]`, `p4 [file]`: fork, wait, exec, redirection |
| `ostep-intro`        | `cpu`, `mem`, `threads`, `io`, `va`: introductory demos             |
| `ostep-lottery`      | lottery scheduling over a list of jobs with tickets                 |
| `ostep-threads`      | `create`, `simple_args`, `return_args`, `t0`, `t1 <loopcount>`      |
| `ostep-bugs`         | `atomicity`, `atomicity_fixed`, `deadlock`, `ordering`, `ordering_fixed` |
| `ostep-cas`          | compare-and-swap succeeding and failing                             |
| `ostep-pstack`       | a stack that persists in a memory-mapped file                       |
| `ostep-benchmarks`   | `reads [path]`, `switches`: null read and pipe ping-pong timings    |
| `ostep-udp-server`   | a UDP server that answers every message (`[port]`)                  |
| `ostep-udp-client`   | a UDP client that sends one message and waits (`[host [port]]`)     |

Commands given the wrong arguments print a usage message and exit with
status 1.

### Lottery scheduling

```
ostep-lottery 1 5
```

Three jobs holding 50, 100 and 25 tickets are entered, and for each of the
requested number of rounds a winning ticket is drawn from a seeded random
source and the job holding it is reported.

### Persistent stack

The stack lives in `ps.img` in the current directory, which must already
exist; `ostepdemos.pstack.create_image` makes an empty one. Numbers are
pushed, and the word `pop` prints and removes the top value:

```
ostep-pstack 7 13 47 pop
ostep-pstack pop pop 99
ostep-pstack pop
```

The values pushed in one run are still there in the next. Pushes onto a
full stack and pops from an empty one are ignored.

### UDP

Start the server in one terminal and the client in another:

```
ostep-udp-server
ostep-udp-client
```

The server listens on port 10000 and the client binds port 20000.

## Using the library

```python
from ostepdemos.lottery import LotteryScheduler

scheduler = LotteryScheduler(seed=1)
scheduler.insert(50)
scheduler.insert(100)
scheduler.insert(25)
print(scheduler.format_list())   # List: [25] [100] [50]
print(scheduler.total_tickets)   # 175
winner, tickets = scheduler.draw()
```

```python
from ostepdemos.pstack import PersistentStack, create_image

create_image("ps.img", 4096)
with PersistentStack("ps.img") as stack:
    stack.push(7)
    stack.push(13)
    print(stack.pop(), len(stack), stack.capacity)
```

```python
from ostepdemos.atomic import AtomicInt

cell = AtomicInt(0)
cell.compare_and_swap(0, 100)   # True
cell.compare_and_swap(0, 200)   # False
print(cell.value)               # 100
```

Other entry points include `ostepdemos.bugs.atomicity`, `deadlock` and
`ordering`, `ostepdemos.threads_demo.run_t1`, `ostepdemos.intro.threads_counter`,
`ostepdemos.benchmarks.time_null_reads` and `time_pipe_switches`, and the
`ostepdemos.udp` helpers `udp_open`, `fill_sock_addr`, `udp_write`,
`udp_read` and `udp_close`.

## What it does not include

The package has no condition-variable or semaphore demonstrations: there
is no producer/consumer buffer, no dining philosophers, no thread
throttling, no semaphore built from a lock and condition, and no
reader/writer lock. Its concurrency demos stop at plain threads, locks,
a single condition used in `ostepdemos.bugs.ordering`, and compare-and-swap.