"""
Standard strategy for turning attributes and slots into props.

For component elements:
- attribute names are renamed via component_prop_names, else camelCased
  ("data-user-id" -> "dataUserId")
- attribute values are JSON-decoded when possible ("42" -> 42,
  "[1, 2]" -> [1, 2]); anything that isn't JSON stays a string
- slots are assigned by dotted path, so slot="header.title" ends up in
  props["header"]["title"]

For intrinsic elements only element_prop_names renames are applied, and
slots are not merged in.
"""

import json
import math
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, Mapping, Optional

from ..utils.object_utils import map_keys as default_map_keys
from ..utils.object_utils import map_values as default_map_values
from ..utils.object_utils import set_path as default_set_path
from ..utils.string_utils import to_camel_case

Propsify = Callable[[Dict[str, str], Dict[str, Any], "PropsifyContext"], Dict[str, Any]]


@dataclass(frozen=True)
class PropsifyContext:
    """Information about the element whose props are being built."""

    tag_name: Optional[str]
    component: Any
    element: Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Not valid JSON: {name}")


def _parse_finite_float(text: str) -> float:
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"Number out of range: {text}")
    return number


def decode_value(value: Any) -> Any:
    """
    JSON-decode an attribute value, returning it unchanged on failure.

    NaN, Infinity and numbers too large for a float (1e400) are not
    representable in JSON and stay strings, as do values nested too deeply
    to decode.
    """
    if not isinstance(value, str):
        return value
    try:
        return json.loads(
            value,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except (ValueError, RecursionError):
        return value


def propsify(
    attributes: Mapping[str, str],
    slots: Mapping[str, Any],
    context: PropsifyContext,
    *,
    component_prop_names: Optional[Mapping[str, str]] = None,
    element_prop_names: Optional[Mapping[str, str]] = None,
    map_keys: Callable = default_map_keys,
    map_values: Callable = default_map_values,
    set_path: Callable = default_set_path,
    camel_case: Callable[[str], str] = to_camel_case,
) -> Dict[str, Any]:
    """
    Build props for one element.

    Args:
        attributes: Attribute name -> value
        slots: Slot name -> converted child
        context: The element being converted
        component_prop_names: Explicit renames for component attributes
        element_prop_names: Explicit renames for intrinsic element attributes
        map_keys, map_values, set_path, camel_case: Helper overrides

    Returns:
        Props dict
    """
    component_prop_names = component_prop_names or {}
    element_prop_names = element_prop_names or {}

    if not context.component:
        return map_keys(attributes, lambda value, key: element_prop_names.get(key) or key)

    props = map_keys(
        attributes,
        lambda value, key: component_prop_names.get(key) or camel_case(key),
    )
    props = map_values(props, lambda value, key: decode_value(value))
    for name, child in slots.items():
        set_path(props, name, child)
    return props


def create_propsify(
    component_prop_names: Optional[Mapping[str, str]] = None,
    element_prop_names: Optional[Mapping[str, str]] = None,
    **helpers: Callable,
) -> Propsify:
    """
    Bind rename tables and helper overrides into a propsify function.

    The result has the (attributes, slots, context) signature expected by
    hyperscriptify().
    """
    return partial(
        propsify,
        component_prop_names=dict(component_prop_names or {}),
        element_prop_names=dict(element_prop_names or {}),
        **helpers,
    )
