import functools
import json
from typing import Any

import cattrs
from cattrs.preconf.json import make_converter

from ._external_union import configure_external_union
from ._tagged import UnstructuredResult, check_unstructured_result
from .._result import Result, Success, Failure

converter = make_converter()
"""The converter used by the functions of this module."""


def result_type(value_type: Any, error_type: Any) -> Any:
    """Return the union of the success and failure variants for the given types."""

    return Success[value_type] | Failure[error_type]


@functools.cache
def _configured_result_type(
    converter: cattrs.BaseConverter, value_type: Any, error_type: Any
) -> Any:
    union = result_type(value_type, error_type)
    configure_external_union(union, converter)
    return union


def unstructure(
    result: Result[Any, Any],
    value_type: Any,
    error_type: Any,
) -> UnstructuredResult:
    """Convert a result to plain data.

    Example:
        >>> unstructure(Success(1), int, str)
        {'Success': {'value': 1}}
    """

    union = _configured_result_type(converter, value_type, error_type)
    return converter.unstructure(result, unstructure_as=union)


def structure(data: Any, value_type: Any, error_type: Any) -> Result[Any, Any]:
    """Convert plain data back to a result.

    Raises:
        ValueError: If the data doesn't contain exactly one known variant tag.
    """

    data = check_unstructured_result(data)
    union = _configured_result_type(converter, value_type, error_type)
    return converter.structure(data, union)


def to_json(result: Result[Any, Any], value_type: Any, error_type: Any) -> str:
    union = _configured_result_type(converter, value_type, error_type)
    return converter.dumps(result, unstructure_as=union)


def from_json(json_string: str, value_type: Any, error_type: Any) -> Result[Any, Any]:
    return structure(json.loads(json_string), value_type, error_type)
