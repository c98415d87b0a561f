import logging
import os
import random
import stat
import sys

import pytest

from kmdiff.exceptions import BinaryNotFound, ExternalExecFailed
from kmdiff.utils import (
    VerbosityLevel,
    command_exists,
    exec_external_cmd,
    get_binary_dir,
    get_current_rss,
    get_peak_rss,
    get_uname_sr,
    random_dna_seq,
    set_verbosity_level,
    str_to_verbosity_level,
)


def test_command_exists():
    assert command_exists(".", "ls") == "ls"
    with pytest.raises(BinaryNotFound):
        command_exists(".", "aqszed")


def test_command_exists_in_directory(tmp_path):
    tool = tmp_path / "kmdtool"
    tool.write_text("#!/bin/sh\nexit 0\n")
    tool.chmod(tool.stat().st_mode | stat.S_IXUSR)
    assert command_exists(str(tmp_path), "kmdtool") == f"{tmp_path}/kmdtool"


def test_get_binary_dir_is_directory():
    directory = os.fspath(get_binary_dir())
    assert directory == os.path.normpath(directory)
    assert os.path.isdir(directory)


@pytest.mark.parametrize(
    "name,level",
    [
        ("debug", VerbosityLevel.DEBUG),
        ("info", VerbosityLevel.INFO),
        ("warning", VerbosityLevel.WARNING),
        ("error", VerbosityLevel.ERROR),
        ("def", VerbosityLevel.WARNING),
    ],
)
def test_str_to_verbosity_level(name, level):
    assert str_to_verbosity_level(name) == level


@pytest.mark.parametrize(
    "name,verbosity,level",
    [
        ("debug", VerbosityLevel.DEBUG, logging.DEBUG),
        ("info", VerbosityLevel.INFO, logging.INFO),
        ("warning", VerbosityLevel.WARNING, logging.WARNING),
        ("error", VerbosityLevel.ERROR, logging.ERROR),
    ],
)
def test_set_verbosity_level(name, verbosity, level):
    set_verbosity_level(name)
    assert str_to_verbosity_level(name) == verbosity
    assert logging.getLogger("kmdiff").level == level


def test_rss():
    assert get_peak_rss() > 0
    assert get_current_rss() >= 0


def test_ext_success(tmp_path):
    out = tmp_path / "ext_test"
    assert exec_external_cmd("ls", str(tmp_path), str(out)) == 0
    assert "ext_test" in out.read_text()


def test_ext_failure(tmp_path):
    script = tmp_path / "ret1.py"
    script.write_text("raise SystemExit(1)\n")
    with pytest.raises(ExternalExecFailed):
        exec_external_cmd(sys.executable, str(script))


def test_ext_missing_binary():
    with pytest.raises(ExternalExecFailed):
        exec_external_cmd("./definitely-not-here-aqszed", "")


def test_uname():
    assert len(get_uname_sr()) > 0


def test_random_dna_seq():
    seq = random_dna_seq(50, random.Random(3))
    assert len(seq) == 50
    assert set(seq) <= set("ACGT")
    assert random_dna_seq(50, random.Random(3)) == seq