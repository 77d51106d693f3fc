from dataclasses import dataclass
from typing import Optional, Sequence, Union

from decimal_matcher.domain.exceptions import ConfigurationError

DEFAULT_MAX_DIGITS = 11


def _check_limit(name: str, value: object) -> None:
    # bool is an int subclass, but True is not a digit count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            "decimal number matcher", f"{name} must be an integer, got {value!r}"
        )
    if value < 0:
        raise ConfigurationError(
            "decimal number matcher", f"{name} cannot be negative: {value}"
        )


@dataclass(frozen=True)
class NoLimit:
    """No parameters: the default digit limit applies, decimal places are free."""

    @property
    def max_digits(self) -> int:
        return DEFAULT_MAX_DIGITS

    @property
    def max_decimal_places(self) -> Optional[int]:
        return None


@dataclass(frozen=True)
class MaxDigits:
    digits: int

    def __post_init__(self):
        _check_limit("max digits", self.digits)

    @property
    def max_digits(self) -> int:
        return self.digits

    @property
    def max_decimal_places(self) -> Optional[int]:
        return None


@dataclass(frozen=True)
class MaxDigitsAndPlaces:
    digits: int
    places: int

    def __post_init__(self):
        _check_limit("max digits", self.digits)
        _check_limit("max decimal places", self.places)

    @property
    def max_digits(self) -> int:
        return self.digits

    @property
    def max_decimal_places(self) -> Optional[int]:
        return self.places


Limits = Union[NoLimit, MaxDigits, MaxDigitsAndPlaces]


def resolve_limits(params: Sequence[int]) -> Limits:
    """
    Resolve positional matcher parameters into limits.

    :param params: (), (max_digits,) or (max_digits, max_decimal_places)
    :return: Matching Limits variant

    :raises ConfigurationError: on any other parameter count or an invalid value
    """
    if len(params) == 0:
        return NoLimit()

    if len(params) == 1:
        return MaxDigits(params[0])

    if len(params) == 2:
        return MaxDigitsAndPlaces(params[0], params[1])

    raise ConfigurationError(
        "decimal number matcher",
        f"expected at most 2 parameters, got {len(params)}: {tuple(params)}",
    )
