import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from decimal_matcher.domain.values import DecimalNumber

# Optional sign, digits with at most one ".", optional exponent.
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class ParseSuccess:
    number: DecimalNumber


@dataclass(frozen=True)
class ParseFailure:
    reason: str


ParseOutcome = Union[ParseSuccess, ParseFailure]


def parse_decimal(text: object) -> ParseOutcome:
    """
    Parse text into an exact decimal number without coercion.

    Whitespace, digit group underscores, NaN and Infinity are rejected even though
    Decimal itself would accept them.

    :param text: Candidate value
    :return: ParseSuccess with the number, or ParseFailure with the reason
    """
    if not isinstance(text, str):
        return ParseFailure(f"expected a string, got {type(text).__name__}")

    if DECIMAL_PATTERN.fullmatch(text) is None:
        return ParseFailure(f"not a decimal numeral: {text!r}")

    try:
        value = Decimal(text)
    except InvalidOperation:
        return ParseFailure(f"not a decimal numeral: {text!r}")

    if not value.is_finite():
        return ParseFailure(f"exponent out of range: {text!r}")

    return ParseSuccess(DecimalNumber(value))
