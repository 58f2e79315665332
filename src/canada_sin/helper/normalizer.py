"""
Turn a free-form string into the sequence of digits of a SIN.
Anything that is not an ASCII digit (spaces, dashes, letters, other
scripts' digits) is dropped without complaint.
"""

import regex

from typing import Tuple

from .exception import InvArgException, TooShort, TooLong


SIN_LENGTH = 9

_DIGIT_REGEX = regex.compile(r"[0-9]", flags=regex.VERSION0)


def digits(text: str) -> Tuple[int, ...]:
    """
    Return all the decimal digits in the string, in order of appearance
    """
    if not isinstance(text, str):
        raise InvArgException("expected a string, got {}", type(text).__name__)
    return tuple(int(c) for c in _DIGIT_REGEX.findall(text))


def normalize(text: str) -> Tuple[int, ...]:
    """
    Extract the digits of a string and check there are exactly as many as a
    SIN needs
     :raises TooShort: fewer than 9 digits found
     :raises TooLong: more than 9 digits found
    """
    found = digits(text)
    if len(found) < SIN_LENGTH:
        raise TooShort(
            "too short: {} digits found, {} needed",
            len(found),
            SIN_LENGTH,
            digits=found,
        )
    if len(found) > SIN_LENGTH:
        raise TooLong(
            "too long: {} digits found, {} needed",
            len(found),
            SIN_LENGTH,
            digits=found,
        )
    return found
