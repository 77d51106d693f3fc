from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DecimalNumber:
    """
    An exactly represented, finite decimal number.
    Precision and decimal places are derived from the digits as written.
    """

    value: Decimal

    def __post_init__(self):
        if not self.value.is_finite():
            raise ValueError(f"Decimal number must be finite: {self.value}")

    @property
    def precision(self) -> int:
        """
        Count of significant digits.

        Leading zeros and trailing zeros of the fractional part are not
        significant, zeros of the integer part are ("100" -> 3, "1.50" -> 2).
        Zero has one significant digit whatever its exponent ("0e5" -> 1).
        """
        if self.value.is_zero():
            return 1

        _, digits, exponent = self.value.as_tuple()
        significant = list(digits)

        while len(significant) > 1 and significant[0] == 0:
            significant.pop(0)

        while exponent < 0 and len(significant) > 1 and significant[-1] == 0:
            significant.pop()
            exponent += 1

        return len(significant) + max(exponent, 0)

    @property
    def decimal_places(self) -> int:
        """Count of digits after the decimal separator ("1.50" -> 2)."""
        exponent = self.value.as_tuple().exponent
        return max(-exponent, 0)

    def __str__(self) -> str:
        return str(self.value)
