import logging

import pytest

from canada_sin.helper.exception import InvalidChecksum, InvArgException

import canada_sin.helper.checksum as mod


def d(number: str):
    return tuple(int(c) for c in number)


VALID = ["046454286", "000000000", "963553151", "339892317", "100000009"]

INVALID = ["123456789", "425453457", "759268676", "635563453", "999999999"]


def test10_as_string():
    assert mod.as_string(d("046454286")) == "046454286"
    assert mod.as_string(()) == ""


def test11_as_string_invalid():
    for digit in (10, -1, "5", None, 1.0, True, False):
        with pytest.raises(InvArgException):
            mod.as_string((0, 4, digit))


def test20_checksum():
    assert mod.checksum(d("046454286")) == 0
    # weighted sum is 47
    assert mod.checksum(d("123456789")) == 7
    # weighted sum is 81, the largest possible one
    assert mod.checksum(d("999999999")) == 1
    assert mod.checksum(d("000000000")) == 0


def test30_is_valid():
    for number in VALID:
        assert mod.is_valid(d(number)), number
    for number in INVALID:
        assert not mod.is_valid(d(number)), number


def test31_doubling_positions():
    """
    Only digits at positions 1, 3, 5, 7 are doubled
    """
    # 5 at an even position counts 5, at an odd position 10 -> 1
    assert mod.checksum(d("500000000")) == 5
    assert mod.checksum(d("050000000")) == 1
    # 9 doubled is 18 -> 9
    assert mod.checksum(d("090000000")) == 9
    assert mod.checksum(d("000000090")) == 9


def test40_check():
    mod.check(d("046454286"))
    with pytest.raises(InvalidChecksum) as e:
        mod.check(d("123456789"))
    assert e.value.digits == d("123456789")


def test41_check_bool():
    with pytest.raises(InvArgException):
        mod.check([False] * 9)


def test50_log(caplog):
    caplog.set_level(logging.DEBUG, logger=mod.__name__)
    mod.checksum(d("046454286"))
    assert "luhn checksum for 046454286: 0" in caplog.text
