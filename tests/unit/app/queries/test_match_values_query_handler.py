import pytest

from decimal_matcher.app.queries import MatchValuesQuery, MatchValuesQueryHandler
from decimal_matcher.domain.exceptions import ConfigurationError


def test_handle_returns_one_match_per_value_in_order():
    # Given
    handler = MatchValuesQueryHandler()
    query = MatchValuesQuery(values=("123.45", "abc", None, "1.234"), params=(5, 2))

    # When
    result = handler.handle(query)

    # Then
    assert [m.value for m in result.matches] == ["123.45", "abc", None, "1.234"]
    assert [m.result.codes() for m in result.matches] == [
        [],
        ["doubleNumber.e001"],
        [],
        ["doubleNumber.e003"],
    ]
    assert result.invalid_count == 2
    assert not result.all_valid
    assert result.matcher == "DecimalNumberMatcher(5, 2)"


def test_handle_uses_default_configuration():
    result = MatchValuesQueryHandler().handle(MatchValuesQuery(values=("12345678901",)))

    assert result.all_valid
    assert result.matcher == "DecimalNumberMatcher()"


def test_handle_empty_values():
    result = MatchValuesQueryHandler().handle(MatchValuesQuery(values=()))

    assert result.matches == ()
    assert result.all_valid


def test_handle_propagates_configuration_error():
    with pytest.raises(ConfigurationError):
        MatchValuesQueryHandler().handle(MatchValuesQuery(values=("1",), params=(1, 2, 3)))
