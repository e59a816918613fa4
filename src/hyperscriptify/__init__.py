"""
hyperscriptify: turn markup trees into hyperscript element trees.
"""

from .converter import Hyperscriptifier
from .errors import HyperscriptifyError, MaxDepthExceededError, TemplateNotFoundError
from .generator import Fragment, JSONGenerator, VElement, h
from .source import CommentNode, ElementNode, FragmentNode, NodeType, SoupNode, SourceNode, TextNode
from .transformer import (
    DEFAULT_MAX_DEPTH,
    PropNameMappings,
    PropsifyContext,
    create_propsify,
    hyperscriptify,
    propsify,
)

__version__ = "0.1.0"

__all__ = [
    "Hyperscriptifier",
    "HyperscriptifyError",
    "MaxDepthExceededError",
    "TemplateNotFoundError",
    "Fragment",
    "JSONGenerator",
    "VElement",
    "h",
    "CommentNode",
    "ElementNode",
    "FragmentNode",
    "NodeType",
    "SoupNode",
    "SourceNode",
    "TextNode",
    "DEFAULT_MAX_DEPTH",
    "PropNameMappings",
    "PropsifyContext",
    "create_propsify",
    "hyperscriptify",
    "propsify",
]
