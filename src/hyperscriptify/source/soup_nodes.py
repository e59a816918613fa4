"""
Source nodes backed by an already-parsed BeautifulSoup tree.
"""

from typing import List, Optional, Sequence

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from .node_interface import NodeType, SourceNode


class SoupNode(SourceNode):
    """
    Wraps a BeautifulSoup PageElement.

    A BeautifulSoup document maps to a fragment, a Tag to an element and a
    plain NavigableString to a text node. Comments, doctypes, CDATA and
    processing instructions map to NodeType.OTHER and are skipped.

    Text is whatever BeautifulSoup kept: it collapses whitespace-only
    strings to a single "\\n" (or " " when there is no newline). Attributes
    it splits into lists (class, rel, ...) are joined with single spaces, so
    "a  b" reads back as "a b"; parse with multi_valued_attributes=None to
    keep such values as written.
    """

    def __init__(
        self,
        element: PageElement,
        parent: Optional[SourceNode] = None,
        as_fragment: bool = False,
    ):
        self.element = element
        self._parent = parent
        self._as_fragment = as_fragment

    @classmethod
    def wrap(cls, element: PageElement) -> "SoupNode":
        """Wrap a node of a parsed tree."""
        return cls(element)

    @classmethod
    def fragment(cls, tag: Tag) -> "SoupNode":
        """
        Expose the content of tag as a document fragment.

        This is how the body of a <template> element is converted without
        the <template> wrapper itself.
        """
        return cls(tag, as_fragment=True)

    @property
    def node_type(self) -> NodeType:
        if self._as_fragment or isinstance(self.element, BeautifulSoup):
            return NodeType.DOCUMENT_FRAGMENT
        if isinstance(self.element, Tag):
            return NodeType.ELEMENT
        if isinstance(self.element, PreformattedString):
            return NodeType.OTHER
        if isinstance(self.element, NavigableString):
            return NodeType.TEXT
        return NodeType.OTHER

    @property
    def node_name(self) -> str:
        node_type = self.node_type
        if node_type == NodeType.ELEMENT:
            return self.element.name
        if node_type == NodeType.DOCUMENT_FRAGMENT:
            return "#document-fragment"
        if node_type == NodeType.TEXT:
            return "#text"
        return "#other"

    @property
    def node_value(self) -> Optional[str]:
        if isinstance(self.element, NavigableString):
            return str(self.element)
        return None

    @property
    def child_nodes(self) -> Sequence["SoupNode"]:
        if not isinstance(self.element, Tag):
            return ()
        return tuple(SoupNode(child, parent=self) for child in self.element.contents)

    @property
    def parent_node(self) -> Optional[SourceNode]:
        if self._parent is not None or self._as_fragment:
            return self._parent
        if self.element.parent is None:
            return None
        return SoupNode(self.element.parent)

    def attribute_names(self) -> List[str]:
        if self.node_type != NodeType.ELEMENT:
            return []
        return [name.lower() for name in self.element.attrs]

    def get_attribute(self, name: str) -> Optional[str]:
        if self.node_type != NodeType.ELEMENT:
            return None
        for key, value in self.element.attrs.items():
            if key.lower() == name.lower():
                # Multi-valued attributes such as class come back as lists
                if isinstance(value, (list, tuple)):
                    return " ".join(value)
                return value
        return None

    def __repr__(self) -> str:
        return f"SoupNode({self.node_name!r})"
