"""Fixed-size pool of worker threads consuming a task queue."""

import collections
import logging
import os
import threading

_log = logging.getLogger("kmdiff")


class ThreadPool:
    """Runs callables taking the worker index; bounded by the number of CPUs."""

    def __init__(self, threads):
        cpus = os.cpu_count() or threads
        self._n = min(threads, cpus)
        self._queue = collections.deque()
        self._cond = threading.Condition()
        self._stop = False
        self._pool = [
            threading.Thread(target=self._worker, args=(i,), daemon=True)
            for i in range(self._n)
        ]
        for t in self._pool:
            t.start()

    def __len__(self):
        return self._n

    def add_task(self, func):
        with self._cond:
            if self._stop:
                raise RuntimeError("Push on stopped Pool.")
            self._queue.append(func)
            self._cond.notify()

    def _shutdown(self):
        with self._cond:
            self._stop = True
            self._cond.notify_all()

    def join_all(self):
        """Stop accepting tasks, drain the queue and wait for every worker."""
        self._shutdown()
        for t in self._pool:
            t.join()

    def join(self, i):
        self._pool[i].join()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.join_all()
        return False

    def _worker(self, i):
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._stop or self._queue)
                if self._stop and not self._queue:
                    return
                task = self._queue.popleft()
            try:
                task(i)
            except Exception:
                _log.exception("Task failed in worker %d.", i)