import functools
import logging


from typing import Callable, TypeVar, ParamSpec

from .._result import Result, Success, Failure


_P = ParamSpec("_P")
_T = TypeVar("_T")
_E = TypeVar("_E")


def log_result(
    logger: logging.Logger,
    level: int = logging.DEBUG,
    failure_level: int = logging.DEBUG,
):
    """Decorator to log the outcome of a function returning a result.

    The returned result is passed through untouched and exceptions raised by the
    decorated function are not caught.

    Args:
        logger: The logger to emit the records to.
        level: The level used for the call and for a success.
        failure_level: The level used when the function returns a failure.
    """

    def decorator(
        func: Callable[_P, Result[_T, _E]]
    ) -> Callable[_P, Result[_T, _E]]:
        @functools.wraps(func)
        def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> Result[_T, _E]:
            logger.log(level, "Calling %s.", func.__name__)
            result = func(*args, **kwargs)
            match result:
                case Success():
                    logger.log(level, "%s succeeded.", func.__name__)
                case Failure(error):
                    logger.log(
                        failure_level, "%s failed with %r.", func.__name__, error
                    )
            return result

        return wrapper

    return decorator
