"""Kinds of multiple-testing correction."""

import enum


class CorrectionType(enum.Enum):
    NOTHING = enum.auto()
    BONFERRONI = enum.auto()
    BENJAMINI = enum.auto()
    SIDAK = enum.auto()
    HOLM = enum.auto()


def correction_type_str(correction):
    """Upper-case name of a correction type."""
    return CorrectionType(correction).name