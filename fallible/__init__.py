"""Defines the result type and its variants: success and failure.

The Result type is a union type of Success and Failure, where Success contains a
successful value and Failure contains an error.

It is mostly meant to be used as a return type for functions that can fail, where we
want to be sure to handle all cases in the calling code and not raise unhandled
exceptions.

Results are immutable. They are transformed with :meth:`Success.map` and
:meth:`Success.flat_map`, which are skipped when the result is a failure, so that the
first error of a chain is carried to the end of it unchanged.
Exceptions raised by the functions passed to these methods are not caught.

With a type checker, we can ensure that all possible success and failure cases are
dealt with.

Example:
    .. code-block:: python

        from typing import assert_never

        from fallible import Success, Failure, is_failure_type, is_success

        def read_file(file_path: str) -> Success[str] | Failure[FileNotFoundError]:
            try:
                with open(file_path) as file:
                    return Success(file.read())
            except FileNotFoundError as error:
                return Failure(error)

        result = read_file("file.txt").map(str.upper)
        if is_failure_type(result, FileNotFoundError):
            print("File not found")
        elif is_success(result):
            print(result.value)
        else:
            assert_never(result)
"""

from ._exceptions import UnwrapError, InvalidEncodingError
from ._result import (
    Failure,
    Result,
    Success,
    failure,
    flatten,
    is_failure,
    is_failure_type,
    is_success,
    success,
    unwrap,
)

__all__ = [
    "Failure",
    "Result",
    "Success",
    "failure",
    "flatten",
    "is_failure",
    "is_failure_type",
    "is_success",
    "success",
    "unwrap",
    "UnwrapError",
    "InvalidEncodingError",
]
