from __future__ import annotations

from collections.abc import Callable
from typing import Never, Literal, overload, Any

import attrs
from typing_extensions import TypeIs

from ._exceptions import UnwrapError


@attrs.frozen(repr=False, str=False)
class Success[T]:
    """The variant of a result holding a value."""

    value: T

    def unwrap(self) -> T:
        return self.value

    def map[R](self, func: Callable[[T], R]) -> Success[R]:
        """Apply a function to the value and wrap its return value.

        Exceptions raised by the function are not caught.
        """

        return Success(func(self.value))

    def flat_map[R, E](self, func: Callable[[T], Result[R, E]]) -> Result[R, E]:
        """Apply a function returning a result to the value.

        This is the same as flattening the output of :meth:`map`, so the result
        returned by the function is passed through as is.
        """

        return flatten(self.map(func))

    def map_error(self, func: Callable[[Never], Any]) -> Success[T]:
        return self

    def fold[R](
        self, on_success: Callable[[T], R], on_failure: Callable[[Never], R]
    ) -> R:
        return on_success(self.value)

    @staticmethod
    def is_success() -> Literal[True]:
        return True

    @staticmethod
    def is_failure() -> Literal[False]:
        return False

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@attrs.frozen(repr=False, str=False)
class Failure[E]:
    """The variant of a result holding an error.

    The error can be any object, it is not required to be an exception.
    """

    error: E

    def unwrap(self) -> Never:
        """Raise the error.

        The traceback of an exception error is reset before it is raised, so that
        frames don't pile up on the stored exception when it is unwrapped several
        times.

        Raises:
            E: If the error is an exception, it is raised as is.
            UnwrapError: If the error is not an exception.
        """

        if isinstance(self.error, BaseException):
            raise self.error.with_traceback(None)
        raise UnwrapError(self.error)

    def map(self, func: Callable[[Any], Any]) -> Failure[E]:
        return self

    def flat_map(self, func: Callable[[Any], Any]) -> Failure[E]:
        return self

    def map_error[F](self, func: Callable[[E], F]) -> Failure[F]:
        """Translate the error into another error.

        This is the only operation that changes the error of a result.
        """

        return Failure(func(self.error))

    def fold[R](
        self, on_success: Callable[[Never], R], on_failure: Callable[[E], R]
    ) -> R:
        return on_failure(self.error)

    @staticmethod
    def is_success() -> Literal[False]:
        return False

    @staticmethod
    def is_failure() -> Literal[True]:
        return True

    def __str__(self) -> str:
        return str(self.error)

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


type Result[T, E] = Success[T] | Failure[E]

# Replace the string annotations of the fields with the type parameters.
attrs.resolve_types(Success)
attrs.resolve_types(Failure)


def success[T](value: T) -> Success[T]:
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    return Failure(error)


def flatten[T, E](nested: Result[Result[T, E], E]) -> Result[T, E]:
    """Remove one level of nesting from a result.

    If the outer result is a success, the inner result is returned unchanged,
    whichever variant it is.
    If the outer result is a failure, it is returned.

    Raises:
        TypeError: If the outer result is a success that doesn't hold a result.
    """

    match nested:
        case Success(Success() | Failure() as inner):
            return inner
        case Success(value):
            raise TypeError(f"Expected a result inside {nested!r}, got {value!r}")
        case Failure():
            return nested
        case _:
            raise TypeError(f"Expected a result, got {nested!r}")


def is_success[T](result: Result[T, Any]) -> TypeIs[Success[T]]:
    return result.is_success()


def is_failure[E](result: Result[Any, E]) -> TypeIs[Failure[E]]:
    return result.is_failure()


def is_failure_type[E](result: Result, error_type: type[E]) -> TypeIs[Failure[E]]:
    return is_failure(result) and isinstance(result.error, error_type)


@overload
def unwrap[T](value: Success[T]) -> T: ...


@overload
def unwrap(value: Failure[Any]) -> Never: ...


def unwrap(value):
    return value.unwrap()
