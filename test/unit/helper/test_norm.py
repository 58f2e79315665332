import pytest

from canada_sin.helper.exception import TooShort, TooLong, InvArgException

import canada_sin.helper.normalizer as mod


TEST_DIGITS = [
    ("046454286", (0, 4, 6, 4, 5, 4, 2, 8, 6)),
    ("046-454-286", (0, 4, 6, 4, 5, 4, 2, 8, 6)),
    (" SIN: 046 454 286.", (0, 4, 6, 4, 5, 4, 2, 8, 6)),
    ("a1b2c3", (1, 2, 3)),
    ("no digits", ()),
    ("", ()),
    # only ASCII digits count
    ("١٢٣ 4", (4,)),
]


def test10_digits():
    for text, exp in TEST_DIGITS:
        assert mod.digits(text) == exp


def test11_digits_not_string():
    with pytest.raises(InvArgException):
        mod.digits(46454286)


def test20_normalize():
    assert mod.normalize("046-454-286") == mod.normalize("046454286")
    assert len(mod.normalize("123-456-789")) == mod.SIN_LENGTH


def test30_too_short():
    for text in ("", "0", "123", "12345678", "123-456-78", "abcdefghi"):
        with pytest.raises(TooShort):
            mod.normalize(text)


def test31_too_short_digits():
    with pytest.raises(TooShort) as e:
        mod.normalize("12-34")
    assert e.value.digits == (1, 2, 3, 4)
    assert str(e.value) == "too short: 4 digits found, 9 needed"


def test40_too_long():
    for text in ("0000000000", "4324234237", "635-462-452-452344343"):
        with pytest.raises(TooLong):
            mod.normalize(text)
