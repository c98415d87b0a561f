"""Wall-clock timer with compact human formatting."""

import time


def format_duration(seconds):
    """Format whole seconds as e.g. ``01d02h03m04s``; zero units are omitted except seconds."""
    seconds = int(seconds)
    days, seconds = divmod(seconds, 86400)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    parts = []
    if days:
        parts.append(f"{days:02d}d")
    if hours:
        parts.append(f"{hours:02d}h")
    if minutes:
        parts.append(f"{minutes:02d}m")
    parts.append(f"{seconds:02d}s")
    return "".join(parts)


class Timer:
    """Monotonic timer that starts on creation."""

    def __init__(self):
        self._running = False
        self._start_time = 0.0
        self._end_time = 0.0
        self.start()

    @property
    def running(self):
        return self._running

    def reset(self):
        self._running = False
        self._start_time = 0.0
        self._end_time = 0.0
        self.start()

    def start(self):
        self._running = True
        self._start_time = time.monotonic()

    def end(self):
        self._running = False
        self._end_time = time.monotonic()

    def elapsed(self):
        """Seconds elapsed, up to now if running, else up to the last end."""
        stop = time.monotonic() if self._running else self._end_time
        return stop - self._start_time

    def formatted(self):
        if self._running:
            self.end()
        return format_duration(self._end_time - self._start_time)