"""Source tree interface and implementations."""

from .node_interface import NodeType, SourceNode
from .memory_nodes import CommentNode, ElementNode, FragmentNode, TextNode
from .soup_nodes import SoupNode

__all__ = [
    "NodeType",
    "SourceNode",
    "CommentNode",
    "ElementNode",
    "FragmentNode",
    "TextNode",
    "SoupNode",
]
