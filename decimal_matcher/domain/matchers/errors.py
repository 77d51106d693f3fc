from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDescriptor:
    code: str
    message: str


VALID_DECIMAL_NUMBER = ErrorDescriptor(
    code="doubleNumber.e001",
    message="The value is not a valid decimal number.",
)

EXCEEDED_DIGITS = ErrorDescriptor(
    code="doubleNumber.e002",
    message="The value exceeded maximum number of digits.",
)

EXCEEDED_DECIMAL = ErrorDescriptor(
    code="doubleNumber.e003",
    message="The value exceeded maximum number of decimal places.",
)
