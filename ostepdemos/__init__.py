"""Runnable demonstrations of processes, scheduling, threads, persistence and networking."""

__version__ = "0.1.0"