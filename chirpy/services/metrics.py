"""
Metrics Service - Request Hit Counter

Counts requests to instrumented routes (the static file server at /app/)
for the admin dashboard. The count lives in memory only and starts at 0
every time the process starts.

One HitCounter is created per application in create_app() and kept on
app.state, so tests can build an application with a fresh counter.
"""

import threading


class HitCounter:
    """
    Concurrency-safe integer counter.

    Increments come from the event loop and from FastAPI's worker threads,
    so increment and reset are guarded by a lock. Reading a single int
    attribute is atomic, so read() never waits on writers.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._value = 0

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    def read(self) -> int:
        return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = 0

    def __repr__(self):
        return f"HitCounter(value={self._value})"
