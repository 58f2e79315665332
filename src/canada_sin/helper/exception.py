from enum import Enum, auto


class ParseErrorKind(str, Enum):
    """
    The reasons a string can fail to parse as a SIN. New kinds may be added
    in later versions
    """

    TOO_SHORT = auto()
    TOO_LONG = auto()
    INVALID_CHECKSUM = auto()


class SinException(Exception):
    def __init__(self, msg, *args):
        super().__init__(msg.format(*args))


class InvArgException(SinException):
    pass


class SinParseError(SinException):
    """
    Base class for all parse failures. Catch this one rather than the
    specific subclasses, since the set of subclasses is not final
    """

    kind = None

    def __init__(self, msg, *args, digits=()):
        super().__init__(msg, *args)
        self.digits = tuple(digits)


class TooShort(SinParseError):
    kind = ParseErrorKind.TOO_SHORT


class TooLong(SinParseError):
    kind = ParseErrorKind.TOO_LONG


class InvalidChecksum(SinParseError):
    kind = ParseErrorKind.INVALID_CHECKSUM
