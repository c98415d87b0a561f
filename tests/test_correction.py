import pytest

from kmdiff.correction import CorrectionType, correction_type_str


def test_convert():
    assert correction_type_str(CorrectionType.NOTHING) == "NOTHING"
    assert correction_type_str(CorrectionType.BONFERRONI) == "BONFERRONI"
    assert correction_type_str(CorrectionType.BENJAMINI) == "BENJAMINI"


def test_round_trip_through_name():
    for kind in CorrectionType:
        assert CorrectionType[correction_type_str(kind)] is kind


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        correction_type_str("not a correction")