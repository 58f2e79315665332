VERSION = "0.1.0"

from .sintype import SinType
from .sin import SIN, parse, classify, is_valid, validate
from .helper.exception import (
    SinException,
    InvArgException,
    SinParseError,
    ParseErrorKind,
    TooShort,
    TooLong,
    InvalidChecksum,
)
