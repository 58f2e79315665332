from .exception import (
    SinException,
    InvArgException,
    SinParseError,
    ParseErrorKind,
    TooShort,
    TooLong,
    InvalidChecksum,
)
from .normalizer import normalize, SIN_LENGTH
