from decimal_matcher.domain.values import ErrorType, ValidationError, ValidationResult


def test_new_result_is_empty_and_valid():
    result = ValidationResult()

    assert result.is_valid
    assert len(result) == 0
    assert result.errors == ()
    assert result.codes() == []


def test_add_invalid_type_error_appends_in_order():
    # Given
    result = ValidationResult()

    # When
    result.add_invalid_type_error("x.e001", "first")
    result.add_invalid_type_error("x.e002", "second")

    # Then
    assert not result.is_valid
    assert result.codes() == ["x.e001", "x.e002"]
    assert result.errors[0] == ValidationError(ErrorType.INVALID_TYPE, "x.e001", "first")
    assert result.has_error("x.e002")
    assert not result.has_error("x.e003")


def test_errors_property_is_a_copy():
    result = ValidationResult()
    result.add_invalid_type_error("x.e001", "first")

    errors = result.errors
    result.add_invalid_type_error("x.e002", "second")

    assert len(errors) == 1
    assert len(result) == 2


def test_merge_returns_new_result_without_touching_operands():
    # Given
    left = ValidationResult()
    left.add_invalid_type_error("x.e001", "first")
    right = ValidationResult()
    right.add_invalid_type_error("x.e002", "second")

    # When
    merged = left.merge(right)

    # Then
    assert merged.codes() == ["x.e001", "x.e002"]
    assert left.codes() == ["x.e001"]
    assert right.codes() == ["x.e002"]


def test_results_with_same_errors_are_equal():
    a = ValidationResult()
    b = ValidationResult()
    a.add_invalid_type_error("x.e001", "first")
    b.add_invalid_type_error("x.e001", "first")

    assert a == b
    assert [str(e) for e in a] == ["x.e001: first"]
