from .decimal_number import DecimalNumber
from .validation_error import ErrorType, ValidationError
from .validation_result import ValidationResult

__all__ = [
    "DecimalNumber",
    "ErrorType",
    "ValidationError",
    "ValidationResult",
]
