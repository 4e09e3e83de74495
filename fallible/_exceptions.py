from __future__ import annotations

import tblib.pickling_support


def with_note[E: BaseException](exc: E, note: str) -> E:
    """Add a note to an exception."""

    exc.add_note(note)
    return exc


@tblib.pickling_support.install
class UnwrapError(ValueError):
    """Raised when unwrapping a failure whose error is not an exception.

    The error held by the failure is available as the :attr:`error` attribute.
    """

    def __init__(self, error: object):
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"Can't unwrap a failure with error {self.error!r}"


@tblib.pickling_support.install
class InvalidEncodingError(ValueError):
    """Raised when bytes can't be decoded with the requested encoding."""

    pass
