from typing import Any, TypeAlias

from typing_extensions import TypeIs

RESULT_TAGS = frozenset({"Success", "Failure"})

UnstructuredResult: TypeAlias = dict[str, dict[str, Any]]
"""A result converted to plain data, for example ``{"Failure": {"error": "x"}}``."""


def is_unstructured_result(data: Any) -> TypeIs[UnstructuredResult]:
    """Check that data has the shape of an unstructured result.

    The data must be a dictionary with a single key, the tag of the variant, mapped to
    a dictionary holding the fields of the variant.
    """

    if not isinstance(data, dict) or len(data) != 1:
        return False
    tag, fields = next(iter(data.items()))
    return tag in RESULT_TAGS and isinstance(fields, dict)


def check_unstructured_result(data: Any) -> UnstructuredResult:
    """Return the data if it is an unstructured result.

    Raises:
        ValueError: If the data doesn't have the shape of an unstructured result.
    """

    if not is_unstructured_result(data):
        raise ValueError(
            f"Expected a dictionary with a single key among {sorted(RESULT_TAGS)}, "
            f"got {data!r}"
        )
    return data
