"""Fatal-signal handling: log the signal, dump a backtrace and exit."""

import logging
import signal
import sys
import traceback
from pathlib import Path

_log = logging.getLogger("kmdiff")

PROJECT_NAME = "kmdiff"

_HANDLED = (
    signal.SIGABRT,
    signal.SIGFPE,
    signal.SIGILL,
    signal.SIGINT,
    signal.SIGSEGV,
    signal.SIGTERM,
)

_NAMES = {int(sig): sig.name for sig in _HANDLED}


def signal_to_string(signum):
    """Symbolic name of one of the handled signals, or '?' for any other."""
    return _NAMES.get(int(signum), "?")


def backtrace_path():
    """Where default_callback writes the backtrace."""
    return Path(f"./{PROJECT_NAME}_backtrace.log")


def install_handlers(callback=None):
    """Install ``callback`` (or default_callback) for every handled signal.

    Returns the handlers that were installed before, keyed by signal.
    """
    handler = callback or default_callback
    return {sig: signal.signal(sig, handler) for sig in _HANDLED}


def default_callback(signum, frame):
    """Log the signal, write a backtrace file unless interrupted, and exit."""
    stack = "".join(traceback.format_stack(frame))
    path = backtrace_path()
    if signum != signal.SIGINT:
        path.write_text(f"\nBacktrace:\n{stack}")
    description = signal.strsignal(signum) or "Unknown signal"
    msg = (
        f"Killed after receive {description}:{signal_to_string(signum)}"
        f"({int(signum)}) signal."
    )
    if signum != signal.SIGINT:
        msg += (
            f" Demangled backtrace dumped at {path}. "
            f"If the problem persists, please open an issue with the return of "
            f"'{PROJECT_NAME} infos' and the content of {path}"
        )
    _log.error(msg)
    sys.exit(int(signum))