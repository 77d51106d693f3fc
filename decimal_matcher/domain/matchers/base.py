from abc import ABC, abstractmethod
from typing import Optional

from decimal_matcher.domain.values import ValidationResult


class Matcher(ABC):
    @abstractmethod
    def match(self, value: Optional[str]) -> ValidationResult:
        """
        Validate a single value.
        Violations are reported in the returned result, never raised.
        """
        raise NotImplementedError()
