from collections.abc import Callable
from typing import Any, get_origin

import cattrs


def default_tag_generator(typ: type) -> str:
    """Return the class name, without type arguments."""
    return (get_origin(typ) or typ).__name__


def configure_external_union(
    union: Any,
    converter: cattrs.BaseConverter,
    tag_generator: Callable[[type], str] = default_tag_generator,
) -> None:
    """Register hooks converting a union to a dictionary with a single key.

    The key is the tag of the class of the value and the associated value is the
    unstructured value, for example ``{"Success": {"value": 1}}``.

    Members of the union can be generic aliases like ``Success[int]``, in which case
    values are matched by their origin class.
    """

    args = union.__args__
    cls_to_tag = {}
    cls_to_unstructure_hook = {}
    tag_to_structure = {}

    for cl in args:
        origin = get_origin(cl) or cl
        tag = tag_generator(cl)
        cls_to_tag[origin] = tag
        cls_to_unstructure_hook[origin] = converter.get_unstructure_hook(cl)
        tag_to_structure[tag] = (cl, converter.get_structure_hook(cl))

    def unstructure_external_union(
        val,
    ) -> dict:
        cls = val.__class__
        res = cls_to_unstructure_hook[cls](val)
        return {cls_to_tag[cls]: res}

    def structure_external_union(val: dict, _):
        if not isinstance(val, dict) or len(val) != 1:
            raise ValueError("Expected a single key in the dictionary for union type.")
        tag = next(iter(val))
        try:
            cl, structure_hook = tag_to_structure[tag]
        except KeyError:
            raise ValueError(f"Unknown tag '{tag}' for union type.") from None
        return structure_hook(val[tag], cl)

    converter.register_unstructure_hook(union, unstructure_external_union)
    converter.register_structure_hook(union, structure_external_union)
