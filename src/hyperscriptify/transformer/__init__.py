"""Tree conversion and props strategies."""

from .tree_converter import DEFAULT_MAX_DEPTH, hyperscriptify
from .propsify import PropsifyContext, create_propsify, decode_value, propsify
from .mappings import PropNameMappings

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "hyperscriptify",
    "PropsifyContext",
    "create_propsify",
    "decode_value",
    "propsify",
    "PropNameMappings",
]
