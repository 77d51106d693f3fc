from dataclasses import dataclass
from typing import Optional

from decimal_matcher.domain.matchers import DecimalNumberMatcher
from decimal_matcher.domain.values import ValidationResult
from decimal_matcher.shared.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MatchValuesQuery:
    values: tuple[Optional[str], ...]
    params: tuple[int, ...] = ()


@dataclass(frozen=True)
class ValueMatch:
    value: Optional[str]
    result: ValidationResult

    @property
    def is_valid(self) -> bool:
        return self.result.is_valid


@dataclass(frozen=True)
class MatchValuesResult:
    matcher: str
    matches: tuple[ValueMatch, ...]

    @property
    def invalid_count(self) -> int:
        return sum(1 for m in self.matches if not m.is_valid)

    @property
    def all_valid(self) -> bool:
        return self.invalid_count == 0


class MatchValuesQueryHandler:
    def handle(self, query: MatchValuesQuery) -> MatchValuesResult:
        """
        Validate every value of the query with one decimal number matcher.

        :param query: Values and matcher parameters
        :return: MatchValuesResult with one entry per value, in input order

        :raises ConfigurationError: If the matcher parameters are unusable
        """
        matcher = DecimalNumberMatcher(*query.params)

        matches = tuple(
            ValueMatch(value=value, result=matcher.match(value))
            for value in query.values
        )
        result = MatchValuesResult(matcher=repr(matcher), matches=matches)

        logger.info(
            "values_matched",
            matcher=result.matcher,
            total=len(matches),
            invalid=result.invalid_count,
        )

        return result
