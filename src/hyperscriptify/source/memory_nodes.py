"""
In-memory source tree.

Handy for building trees by hand:

    FragmentNode([
        ElementNode("my-widget", {"greeting": "hello"}, [
            ElementNode("span", {"slot": "body"}, [TextNode("hi")]),
        ]),
        ElementNode("p", children=[TextNode("bye")]),
    ])
"""

from typing import Dict, Iterable, List, Optional, Sequence

from .node_interface import NodeType, SourceNode


class _MemoryNode(SourceNode):
    def __init__(self):
        self._parent: Optional[SourceNode] = None
        self._children: List[SourceNode] = []

    @property
    def child_nodes(self) -> Sequence[SourceNode]:
        return tuple(self._children)

    @property
    def parent_node(self) -> Optional[SourceNode]:
        return self._parent

    def _adopt(self, children: Iterable[SourceNode]) -> None:
        for child in children:
            if isinstance(child, _MemoryNode):
                child._parent = self
            self._children.append(child)

    def append_child(self, child: SourceNode) -> SourceNode:
        """Append child and return it."""
        self._adopt([child])
        return child


class ElementNode(_MemoryNode):
    """An element with a tag name, attributes and children."""

    def __init__(
        self,
        tag: str,
        attributes: Optional[Dict[str, str]] = None,
        children: Iterable[SourceNode] = (),
    ):
        super().__init__()
        self.tag = tag
        # Attribute names are case-insensitive in HTML
        self._attributes = {
            name.lower(): str(value) for name, value in (attributes or {}).items()
        }
        self._adopt(children)

    @property
    def node_type(self) -> NodeType:
        return NodeType.ELEMENT

    @property
    def node_name(self) -> str:
        return self.tag

    def attribute_names(self) -> List[str]:
        return list(self._attributes)

    def get_attribute(self, name: str) -> Optional[str]:
        return self._attributes.get(name.lower())

    def set_attribute(self, name: str, value: str) -> None:
        self._attributes[name.lower()] = str(value)

    def __repr__(self) -> str:
        return f"ElementNode({self.tag!r}, {self._attributes!r}, {len(self._children)} children)"


class FragmentNode(_MemoryNode):
    """A document fragment; groups its children without a wrapper element."""

    def __init__(self, children: Iterable[SourceNode] = ()):
        super().__init__()
        self._adopt(children)

    @property
    def node_type(self) -> NodeType:
        return NodeType.DOCUMENT_FRAGMENT

    @property
    def node_name(self) -> str:
        return "#document-fragment"


class TextNode(_MemoryNode):
    """A run of text."""

    def __init__(self, value: str):
        super().__init__()
        self.value = value

    @property
    def node_type(self) -> NodeType:
        return NodeType.TEXT

    @property
    def node_name(self) -> str:
        return "#text"

    @property
    def node_value(self) -> Optional[str]:
        return self.value

    def __repr__(self) -> str:
        return f"TextNode({self.value!r})"


class CommentNode(_MemoryNode):
    """A comment. The converter skips these."""

    def __init__(self, value: str):
        super().__init__()
        self.value = value

    @property
    def node_type(self) -> NodeType:
        return NodeType.COMMENT

    @property
    def node_name(self) -> str:
        return "#comment"

    @property
    def node_value(self) -> Optional[str]:
        return self.value
