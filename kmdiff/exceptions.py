"""Error hierarchy raised by kmdiff."""


class KmdiffError(Exception):
    """Base class of every kmdiff error; carries a short name and a message."""

    name = "Base error"

    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __str__(self):
        return f"{self.name} - {self.msg}"


class BinaryNotFound(KmdiffError):
    name = "BinaryNotFound"


class ExternalExecFailed(KmdiffError):
    name = "ExternalExecFailed"


class KmtricksFileNotFound(KmdiffError):
    name = "KmtricksFileNotFound"


class FileNotFound(KmdiffError):
    name = "FileNotFound"


class ConfigError(KmdiffError):
    name = "ConfigError"


class IOError_(KmdiffError):
    name = "IOError"


class VCFOpenError(KmdiffError):
    name = "VCFOpenError"


class VCFHeaderError(KmdiffError):
    name = "VCFHeaderError"


class BEDOpenError(KmdiffError):
    name = "BEDOpenError"


class BEDBadFormat(KmdiffError):
    name = "BEDBadFormat"


class BAMOpenError(KmdiffError):
    name = "BAMOpenError"


class BAMHeaderError(KmdiffError):
    name = "BAMHeaderError"


class EigenStratError(KmdiffError):
    name = "EigenStratError"


class SingularError(KmdiffError):
    name = "SingularError"


class PluginError(KmdiffError):
    name = "PluginError"