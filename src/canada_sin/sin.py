"""
Definition of the SIN object: a validated Canadian Social Insurance Number
"""

from functools import total_ordering

from typing import Dict, Iterable, List, Tuple

from .sintype import SinType, TYPES_BY_DIGIT
from .helper import checksum
from .helper.normalizer import normalize, SIN_LENGTH
from .helper.exception import InvArgException, SinParseError


@total_ordering
class SIN:
    """
    A Social Insurance Number that has passed validation. It holds its nine
    digits as a tuple of ints, and cannot be modified once created.

    Objects are normally created with `SIN.parse()`; the constructor also
    validates its input, so there is no way to create an invalid one
    """

    __slots__ = ("_digits",)

    def __init__(self, digits: Iterable[int]):
        digits = tuple(digits)
        if len(digits) != SIN_LENGTH:
            raise InvArgException(
                "a SIN needs {} digits, got {}", SIN_LENGTH, len(digits)
            )
        checksum.check(digits)
        object.__setattr__(self, "_digits", digits)

    @classmethod
    def parse(cls, text: str) -> "SIN":
        """
        Parse a SIN from a string. All non-digit characters are ignored, so
        "046-454-286" and "046 454 286" are both fine
         :raises SinParseError: one of TooShort, TooLong or InvalidChecksum
        """
        return cls(normalize(text))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} objects are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} objects are immutable")

    @property
    def digits(self) -> Tuple[int, ...]:
        return self._digits

    @property
    def first_digit(self) -> int:
        return self._digits[0]

    def types(self) -> List[SinType]:
        """
        All the types the SIN *could* be. This will often be more than one,
        since it is based only on the first digit and some digits are shared.
        The ones that can be determined unambiguously are:
          * CRA_ASSIGNED (starts with 0)
          * TEMPORARY_RESIDENT (starts with 9)
          * QUEBEC (starts with 2 or 3)
          * BUSINESS_NUMBER (starts with 8; if it starts with 7 it *might* be)
        """
        return list(TYPES_BY_DIGIT[self.first_digit])

    @property
    def is_business(self) -> bool:
        return self.types() == [SinType.BUSINESS_NUMBER]

    def compact(self) -> str:
        return "".join(str(d) for d in self._digits)

    def formatted(self, separator: str = "-") -> str:
        """
        Return the SIN as three groups of three digits
        """
        c = self.compact()
        return separator.join((c[0:3], c[3:6], c[6:9]))

    def __str__(self) -> str:
        return self.compact()

    def __repr__(self) -> str:
        return f"<SIN {self.formatted()}>"

    def __eq__(self, other):
        if not isinstance(other, SIN):
            return NotImplemented
        return self._digits == other._digits

    def __lt__(self, other):
        if not isinstance(other, SIN):
            return NotImplemented
        return self._digits < other._digits

    def __hash__(self):
        return hash(self._digits)

    def __reduce__(self):
        return (self.__class__, (self._digits,))

    def to_json(self) -> Dict:
        """
        Return the object data as a dict that can then be serialised as JSON
        """
        return {
            "sin": self.compact(),
            "formatted": self.formatted(),
            "types": [t.name for t in self.types()],
        }


def parse(text: str) -> SIN:
    return SIN.parse(text)


def classify(sin: SIN) -> List[SinType]:
    """
    Return the list of possible types for a SIN
    """
    if not isinstance(sin, SIN):
        raise InvArgException("expected a SIN object, got {}", type(sin).__name__)
    return sin.types()


def is_valid(text: str) -> bool:
    """
    Check if a string contains a valid SIN
    """
    try:
        SIN.parse(text)
        return True
    except SinParseError:
        return False


def validate(text: str) -> str:
    """
    Parse a string as a SIN and return it in compact form
     :raises SinParseError: if the string is not a valid SIN
    """
    return SIN.parse(text).compact()
