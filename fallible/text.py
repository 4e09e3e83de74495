"""Fallible reading and decoding of text files.

These functions show how to build a value out of several steps that can fail,
without explicit branching:

.. code-block:: python

    from fallible import Success, Failure
    from fallible.text import uppercase_contents

    match uppercase_contents("file.txt"):
        case Success(text):
            print(text)
        case Failure(error):
            print(f"Could not read file: {error}")
"""

import logging
import os
from pathlib import Path

from ._exceptions import InvalidEncodingError, with_note
from ._result import Result, Success, Failure
from .logging import log_result

logger = logging.getLogger(__name__)


@log_result(logger, failure_level=logging.WARNING)
def read_bytes(path: str | os.PathLike) -> Result[bytes, OSError]:
    """Read the content of a file.

    The OSError raised when the file can't be opened or read is returned as a
    failure.
    """

    try:
        return Success(Path(path).read_bytes())
    except OSError as error:
        return Failure(error)


def decode(data: bytes, encoding: str = "utf-8") -> str:
    """Decode bytes to a string.

    Raises:
        UnicodeDecodeError: If the data is not valid for the encoding.
    """

    return data.decode(encoding)


def decode_or_fail(
    data: bytes, encoding: str = "utf-8"
) -> Result[str, InvalidEncodingError]:
    """Decode bytes to a string, returning a failure if the data is malformed."""

    try:
        return Success(decode(data, encoding))
    except UnicodeDecodeError as error:
        exception = InvalidEncodingError(f"Data is not valid {encoding}")
        exception.__cause__ = error
        invalid = error.object[error.start : error.end]
        note = f"Invalid bytes {invalid!r} at position {error.start}"
        return Failure(with_note(exception, note))


def to_uppercase(text: str) -> str:
    return text.upper()


def uppercase_contents(
    path: str | os.PathLike, encoding: str = "utf-8"
) -> Result[str, OSError | InvalidEncodingError]:
    """Read a text file and return its content in uppercase."""

    return (
        read_bytes(path)
        .flat_map(lambda data: decode_or_fail(data, encoding))
        .map(to_uppercase)
    )
