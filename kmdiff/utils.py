"""Process, logging and system helpers."""

import enum
import logging
import os
import platform
import random
import resource
import shutil
import subprocess
import sys
from pathlib import Path

from kmdiff.exceptions import BinaryNotFound, ExternalExecFailed

_log = logging.getLogger("kmdiff")
_default_rng = random.Random()


class VerbosityLevel(enum.Enum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


def command_exists(directory, cmd):
    """Return ``cmd`` if on PATH, else ``directory/cmd`` if executable there."""
    if shutil.which(cmd):
        return cmd
    candidate = f"{directory}/{cmd}"
    if shutil.which(candidate):
        return candidate
    raise BinaryNotFound(f"{cmd} not found.")


def get_binary_dir():
    """Directory holding the running program."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if not program:
        raise BinaryNotFound("Unable to found kmdiff binary path.")
    return str(Path(program).resolve().parent)


def get_uname_sr():
    """Kernel name and release, as ``uname -sr`` prints them."""
    uname = platform.uname()
    return f"{uname.system} {uname.release}"


def str_to_verbosity_level(level):
    try:
        return VerbosityLevel[level.upper()] if level in {"debug", "info", "warning", "error"} else VerbosityLevel.WARNING
    except KeyError:
        return VerbosityLevel.WARNING


def set_verbosity_level(level):
    """Set the level of the package logger from a name."""
    _log.setLevel(str_to_verbosity_level(level).value)


def _open_output(path):
    return os.open(path, os.O_RDWR | os.O_CREAT, 0o600)


def exec_external_cmd(cmd, args="", sout="", serr=""):
    """Run ``cmd`` with space-separated ``args``, optionally redirecting output.

    Returns 0 on success; raises ExternalExecFailed when the program cannot be
    started or exits with a non-zero status.
    """
    bin_name = Path(cmd).name
    argv = [cmd, *args.split()]
    _log.info("exec: %s %s", bin_name, args)
    fds = []
    try:
        stdout = fds.append(_open_output(sout)) or fds[-1] if sout else None
        stderr = fds.append(_open_output(serr)) or fds[-1] if serr else None
        try:
            proc = subprocess.run(argv, stdout=stdout, stderr=stderr, check=False)
        except OSError as err:
            raise ExternalExecFailed(f"Failed to run {cmd}.") from err
    finally:
        for fd in fds:
            os.close(fd)
    if proc.returncode > 0:
        raise ExternalExecFailed(f"{cmd} exit with {proc.returncode}.")
    _log.info("%s exit normally with (%d).", bin_name, max(proc.returncode, 0))
    return 0


def random_dna_seq(size, rng=None):
    """Random sequence of ``size`` nucleotides from ACGT."""
    rng = rng or _default_rng
    return "".join(rng.choice("ACGT") for _ in range(size))


def get_peak_rss():
    """Peak resident set size as reported by getrusage."""
    return int(resource.getrusage(resource.RUSAGE_SELF).ru_maxrss)


def get_current_rss():
    """Current resident set size in bytes, or 0 when unavailable."""
    try:
        with open("/proc/self/statm") as statm:
            fields = statm.read().split()
        return int(fields[1]) * os.sysconf("SC_PAGE_SIZE")
    except (OSError, IndexError, ValueError):
        return 0