from .match_values import (
    MatchValuesQuery,
    MatchValuesQueryHandler,
    MatchValuesResult,
    ValueMatch,
)

__all__ = [
    "MatchValuesQuery",
    "MatchValuesQueryHandler",
    "MatchValuesResult",
    "ValueMatch",
]
