from .base import Matcher
from .decimal_number import DecimalNumberMatcher
from .errors import (
    EXCEEDED_DECIMAL,
    EXCEEDED_DIGITS,
    VALID_DECIMAL_NUMBER,
    ErrorDescriptor,
)

__all__ = [
    "DecimalNumberMatcher",
    "EXCEEDED_DECIMAL",
    "EXCEEDED_DIGITS",
    "ErrorDescriptor",
    "Matcher",
    "VALID_DECIMAL_NUMBER",
]
