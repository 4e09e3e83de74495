from unittest.mock import Mock

import pytest
from hypothesis import given

from fallible import Success, Failure, failure, flatten, success
from .generate_result import errors, values


@given(errors)
def test_map_skips_failure(e):
    f = Mock()

    assert failure(e).map(f) == failure(e)
    f.assert_not_called()


@given(errors)
def test_flat_map_skips_failure(e):
    f = Mock()

    assert failure(e).flat_map(f) == failure(e)
    f.assert_not_called()


@given(values)
def test_map_calls_function_once(v):
    f = Mock(return_value="mapped")

    assert success(v).map(f) == success("mapped")
    f.assert_called_once_with(v)


@given(values)
def test_flatten_nested_success(v):
    assert flatten(success(success(v))) == success(v)


@given(errors)
def test_flatten_nested_failure(e):
    assert flatten(success(failure(e))) == failure(e)


@given(errors)
def test_flatten_outer_failure(e):
    assert flatten(failure(e)) == failure(e)


def test_flatten_non_nested_success():
    with pytest.raises(TypeError):
        flatten(Success(1))


def test_flat_map_function_not_returning_result():
    with pytest.raises(TypeError):
        Success(1).flat_map(lambda x: x + 1)


def test_map_does_not_catch_exceptions():
    def fail(x):
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        Success(1).map(fail)


def test_flat_map_does_not_catch_exceptions():
    def fail(x):
        raise KeyError(x)

    with pytest.raises(KeyError):
        Success(1).flat_map(fail)


def test_failure_is_carried_unchanged():
    error = ValueError("error")
    result = Failure(error).map(str).flat_map(Success).map(len)

    assert result.error is error


def test_map_error():
    assert Failure("io-error").map_error(str.upper) == Failure("IO-ERROR")


def test_map_error_skips_success():
    f = Mock()

    assert Success(1).map_error(f) == Success(1)
    f.assert_not_called()


def test_map_error_does_not_catch_exceptions():
    def fail(error):
        raise LookupError(error)

    with pytest.raises(LookupError):
        Failure("io-error").map_error(fail)
