from dataclasses import dataclass
from enum import Enum


class ErrorType(str, Enum):
    INVALID_TYPE = "invalidType"


@dataclass(frozen=True)
class ValidationError:
    type: ErrorType
    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"
