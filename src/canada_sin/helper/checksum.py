"""
The Luhn checksum, as applied to SINs: digits in odd positions (counting
from 0 on the left) are doubled, and the total must be a multiple of 10.
For a nine-digit number this is exactly what stdnum.luhn computes
"""

import logging

from stdnum import luhn

from typing import Sequence

from .exception import InvArgException, InvalidChecksum


logger = logging.getLogger(__name__)


def as_string(digits: Sequence[int]) -> str:
    """
    Turn a sequence of single-digit ints into a string of digits
     :raises InvArgException: an element is not an int in [0, 9]
    """
    for idx, digit in enumerate(digits):
        # bool is an int subclass, but True/False are not digits
        if not (type(digit) is int and 0 <= digit <= 9):
            raise InvArgException("invalid digit at position {}: {!r}", idx, digit)
    return "".join(map(str, digits))


def checksum(digits: Sequence[int]) -> int:
    """
    Return the Luhn checksum of the digits: 0 for a valid sequence
    """
    number = as_string(digits)
    result = luhn.checksum(number)
    logger.debug("luhn checksum for %s: %d", number, result)
    return result


def is_valid(digits: Sequence[int]) -> bool:
    return checksum(digits) == 0


def check(digits: Sequence[int]):
    """
    Raise an exception if the sequence does not pass the checksum
    """
    if not is_valid(digits):
        raise InvalidChecksum(
            "invalid checksum for {}", as_string(digits), digits=digits
        )
