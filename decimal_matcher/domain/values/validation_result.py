from typing import Iterator

from .validation_error import ErrorType, ValidationError


class ValidationResult:
    """
    Ordered collection of the errors produced by one validation attempt.
    An empty result means the value is valid.
    """

    def __init__(self, errors: tuple[ValidationError, ...] = ()):
        self._errors: list[ValidationError] = list(errors)

    def add_error(self, error: ValidationError) -> None:
        self._errors.append(error)

    def add_invalid_type_error(self, code: str, message: str) -> None:
        self.add_error(ValidationError(ErrorType.INVALID_TYPE, code, message))

    @property
    def errors(self) -> tuple[ValidationError, ...]:
        return tuple(self._errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def codes(self) -> list[str]:
        return [error.code for error in self._errors]

    def has_error(self, code: str) -> bool:
        return any(error.code == code for error in self._errors)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """
        Combine two results into a new one, keeping the order of errors.

        :param other: Result to append after this one
        :return: New ValidationResult, neither operand is modified
        """
        return ValidationResult(self.errors + other.errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self.errors)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValidationResult):
            return self._errors == other._errors

        return NotImplemented

    def __repr__(self) -> str:
        return f"ValidationResult(errors={self._errors!r})"
