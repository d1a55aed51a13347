"""Lottery scheduling: pick the next job in proportion to its tickets."""

import random
import re
import sys
from collections import deque

__all__ = ["LotteryScheduler", "main"]


def _atoi(text):
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


class LotteryScheduler:
    """A list of jobs, each holding tickets, with a seeded random draw."""

    def __init__(self, seed=0):
        self._rng = random.Random(seed)
        self._jobs = deque()
        self._total = 0

    def insert(self, tickets):
        """Add a job at the head of the list."""
        self._jobs.appendleft(tickets)
        self._total += tickets

    @property
    def total_tickets(self):
        return self._total

    @property
    def jobs(self):
        """Ticket counts of the jobs, head of the list first."""
        return list(self._jobs)

    def pick(self, winner):
        """Return the tickets of the job holding ticket number ``winner``."""
        counter = 0
        for tickets in self._jobs:
            counter += tickets
            if counter > winner:
                return tickets
        raise ValueError(f"no job holds ticket {winner}")

    def draw(self):
        """Draw a winning ticket; return ``(winner, tickets_of_winning_job)``."""
        if self._total <= 0:
            raise ValueError("no tickets to draw from")
        winner = self._rng.randrange(self._total)
        return winner, self.pick(winner)

    def format_list(self):
        return "List: " + "".join(f"[{tickets}] " for tickets in self._jobs)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("usage: lottery <seed> <loops>", file=sys.stderr)
        return 1
    scheduler = LotteryScheduler(_atoi(args[0]))
    loops = _atoi(args[1])
    for tickets in (50, 100, 25):
        scheduler.insert(tickets)
    print(scheduler.format_list())
    for _ in range(loops):
        winner, tickets = scheduler.draw()
        print(scheduler.format_list())
        print(f"winner: {winner} {tickets}\n")
    return 0