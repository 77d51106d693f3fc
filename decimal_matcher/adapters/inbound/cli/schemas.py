from typing import Optional

from pydantic import BaseModel, Field

from decimal_matcher.app.queries import MatchValuesResult, ValueMatch


class ErrorEntry(BaseModel):
    code: str = Field(
        ..., description="Machine-readable error code.", examples=["doubleNumber.e002"]
    )
    message: str = Field(
        ...,
        description="A human-readable description of the error.",
        examples=["The value exceeded maximum number of digits."],
    )


class ValueMatchResponse(BaseModel):
    value: Optional[str] = Field(..., description="The value that was validated.")
    valid: bool = Field(..., description="True when no error was found.")
    errors: list[ErrorEntry] = Field(default_factory=list)


class MatchResponse(BaseModel):
    matcher: str = Field(
        ..., description="Matcher used for validation.", examples=["DecimalNumberMatcher(5, 2)"]
    )
    invalid_count: int = Field(..., ge=0)
    results: list[ValueMatchResponse] = Field(default_factory=list)


class MatchResponseMapper:
    @staticmethod
    def map_value_match(match: ValueMatch) -> ValueMatchResponse:
        return ValueMatchResponse(
            value=match.value,
            valid=match.is_valid,
            errors=[
                ErrorEntry(code=error.code, message=error.message)
                for error in match.result
            ],
        )

    @classmethod
    def map_result_to_response(cls, result: MatchValuesResult) -> MatchResponse:
        return MatchResponse(
            matcher=result.matcher,
            invalid_count=result.invalid_count,
            results=[cls.map_value_match(m) for m in result.matches],
        )
