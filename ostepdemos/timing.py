"""Wall-clock timing helpers used by the demos."""

import time

__all__ = ["get_time", "spin"]


def get_time():
    """Return the current wall-clock time in seconds, with sub-second precision."""
    return time.time()


def spin(howlong):
    """Busy-wait for ``howlong`` seconds without yielding to a sleep call."""
    start = get_time()
    while get_time() - start < howlong:
        pass