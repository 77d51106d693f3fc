from typing import Optional

from decimal_matcher.domain.services import (
    Limits,
    ParseFailure,
    parse_decimal,
    resolve_limits,
)
from decimal_matcher.domain.values import DecimalNumber, ValidationResult
from decimal_matcher.shared.logging import get_logger

from .base import Matcher
from .errors import EXCEEDED_DECIMAL, EXCEEDED_DIGITS, VALID_DECIMAL_NUMBER

logger = get_logger(__name__)


class DecimalNumberMatcher(Matcher):
    """
    Validates that a string represents a decimal number, or is None.
    The decimal separator is always ".".

    Parameters:
    - none: the number may have at most 11 significant digits;
    - max_digits: replaces the default of 11;
    - max_digits, max_decimal_places: both limits must hold.
    """

    def __init__(self, *params: int):
        self._limits = resolve_limits(params)
        self._params = tuple(params)

    @property
    def params(self) -> tuple[int, ...]:
        return self._params

    @property
    def limits(self) -> Limits:
        return self._limits

    def match(self, value: Optional[str]) -> ValidationResult:
        result = ValidationResult()

        if value is None:
            return result

        outcome = parse_decimal(value)

        if isinstance(outcome, ParseFailure):
            logger.debug("decimal_value_rejected", reason=outcome.reason)
            result.add_invalid_type_error(
                VALID_DECIMAL_NUMBER.code, VALID_DECIMAL_NUMBER.message
            )
            return result

        self._validate_max_digits(outcome.number, result)
        self._validate_decimal_places(outcome.number, result)

        return result

    def _validate_max_digits(
        self, number: DecimalNumber, result: ValidationResult
    ) -> None:
        max_digits = self._limits.max_digits

        if number.precision > max_digits:
            logger.debug(
                "decimal_digits_exceeded",
                precision=number.precision,
                max_digits=max_digits,
            )
            result.add_invalid_type_error(EXCEEDED_DIGITS.code, EXCEEDED_DIGITS.message)

    def _validate_decimal_places(
        self, number: DecimalNumber, result: ValidationResult
    ) -> None:
        max_places = self._limits.max_decimal_places

        if max_places is not None and number.decimal_places > max_places:
            logger.debug(
                "decimal_places_exceeded",
                decimal_places=number.decimal_places,
                max_decimal_places=max_places,
            )
            result.add_invalid_type_error(EXCEEDED_DECIMAL.code, EXCEEDED_DECIMAL.message)

    def __repr__(self) -> str:
        args = ", ".join(str(param) for param in self._params)
        return f"DecimalNumberMatcher({args})"
