"""Bounded multi-producer queue that knows when producers are done."""

import collections
import threading


class QueueFinished(Exception):
    """Raised by pop when every producer has finished and the queue is empty."""


class BlockingQueue:
    def __init__(self, max_size, nb_producers):
        self._max_size = max_size
        self._finished = [False] * nb_producers
        self._queue = collections.deque()
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)

    def _all_done(self):
        return all(self._finished)

    def push(self, item):
        """Add an item, blocking while the queue is full."""
        with self._not_full:
            self._not_full.wait_for(lambda: len(self._queue) != self._max_size)
            self._queue.append(item)
            self._not_empty.notify_all()

    def pop(self):
        """Remove the oldest item, blocking while empty; raise QueueFinished at the end."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: self._queue or self._all_done())
            if self._all_done() and not self._queue:
                raise QueueFinished()
            item = self._queue.popleft()
            self._not_full.notify()
            return item

    def end_signal(self, producer=None):
        """Mark one producer (or all, when none is given) as finished."""
        with self._lock:
            if producer is not None:
                self._finished[producer] = True
                if not self._all_done():
                    return
            self._finished = [True] * len(self._finished)
            self._not_empty.notify_all()
            self._not_full.notify_all()

    def __iter__(self):
        while True:
            try:
                yield self.pop()
            except QueueFinished:
                return