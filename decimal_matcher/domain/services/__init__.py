from .decimal_parser import ParseFailure, ParseOutcome, ParseSuccess, parse_decimal
from .limits import (
    DEFAULT_MAX_DIGITS,
    Limits,
    MaxDigits,
    MaxDigitsAndPlaces,
    NoLimit,
    resolve_limits,
)

__all__ = [
    "DEFAULT_MAX_DIGITS",
    "Limits",
    "MaxDigits",
    "MaxDigitsAndPlaces",
    "NoLimit",
    "ParseFailure",
    "ParseOutcome",
    "ParseSuccess",
    "parse_decimal",
    "resolve_limits",
]
