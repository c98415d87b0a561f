import pytest

from kmdiff import exceptions as ex


def test_name_matches_class():
    errors = [
        ex.BinaryNotFound("boom"),
        ex.ExternalExecFailed("boom"),
        ex.KmtricksFileNotFound("boom"),
        ex.FileNotFound("boom"),
        ex.ConfigError("boom"),
        ex.VCFOpenError("boom"),
        ex.VCFHeaderError("boom"),
        ex.BEDOpenError("boom"),
        ex.BEDBadFormat("boom"),
        ex.BAMOpenError("boom"),
        ex.BAMHeaderError("boom"),
        ex.EigenStratError("boom"),
        ex.SingularError("boom"),
        ex.PluginError("boom"),
    ]
    names = [
        "BinaryNotFound",
        "ExternalExecFailed",
        "KmtricksFileNotFound",
        "FileNotFound",
        "ConfigError",
        "VCFOpenError",
        "VCFHeaderError",
        "BEDOpenError",
        "BEDBadFormat",
        "BAMOpenError",
        "BAMHeaderError",
        "EigenStratError",
        "SingularError",
        "PluginError",
    ]
    assert [err.name for err in errors] == names
    assert [err.msg for err in errors] == ["boom"] * len(names)
    assert [str(err) for err in errors] == [f"{name} - boom" for name in names]


def test_config_error_caught_as_base():
    err = ex.ConfigError("failure")
    assert err.msg == "failure"
    with pytest.raises(ex.KmdiffError, match="failure"):
        raise err


def test_io_error_caught_as_base():
    err = ex.IOError_("failure")
    assert err.name == "IOError"
    with pytest.raises(ex.KmdiffError, match="failure"):
        raise err


def test_plugin_error_caught_as_base():
    err = ex.PluginError("dlerror: missing")
    assert str(err) == "PluginError - dlerror: missing"
    with pytest.raises(ex.KmdiffError, match="dlerror: missing"):
        raise err


def test_io_error_name():
    err = ex.IOError_("Unknown gender: X")
    assert err.name == "IOError"
    assert str(err) == "IOError - Unknown gender: X"


def test_binary_not_found_message():
    err = ex.BinaryNotFound("smartpca not found.")
    assert str(err) == "BinaryNotFound - smartpca not found."
    assert err.msg == "smartpca not found."
    with pytest.raises(ex.BinaryNotFound, match="smartpca not found."):
        raise err