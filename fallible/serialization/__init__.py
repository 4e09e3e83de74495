"""Conversion of results to and from plain data with cattrs."""

from ._external_union import configure_external_union, default_tag_generator
from ._tagged import UnstructuredResult, is_unstructured_result
from .converters import (
    converter,
    from_json,
    result_type,
    structure,
    to_json,
    unstructure,
)

__all__ = [
    "converter",
    "structure",
    "unstructure",
    "to_json",
    "from_json",
    "result_type",
    "configure_external_union",
    "default_tag_generator",
    "UnstructuredResult",
    "is_unstructured_result",
]
