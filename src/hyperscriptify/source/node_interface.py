"""
Abstract source node interface.

Any tree handed to hyperscriptify() must expose this small, DOM-like
surface. The converter only reads from it.
"""

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import List, Optional, Sequence


class NodeType(IntEnum):
    """Node kinds, numbered like the DOM's Node.nodeType constants."""

    ELEMENT = 1
    TEXT = 3
    COMMENT = 8
    DOCUMENT_FRAGMENT = 11
    OTHER = 0


class SourceNode(ABC):
    """Abstract interface for nodes of the markup tree being converted."""

    @property
    @abstractmethod
    def node_type(self) -> NodeType:
        """The kind of node."""
        pass

    @property
    @abstractmethod
    def node_name(self) -> str:
        """
        Tag name for elements ("#text", "#document-fragment", ... otherwise).

        The case is whatever the source uses; callers lowercase it.
        """
        pass

    @property
    @abstractmethod
    def child_nodes(self) -> Sequence["SourceNode"]:
        """Child nodes in document order."""
        pass

    @property
    @abstractmethod
    def parent_node(self) -> Optional["SourceNode"]:
        """The parent node, or None for a root."""
        pass

    @property
    def node_value(self) -> Optional[str]:
        """Text content for text and comment nodes, None otherwise."""
        return None

    def attribute_names(self) -> List[str]:
        """Attribute names of an element, lowercase. Empty for other nodes."""
        return []

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Look up an attribute value.

        Args:
            name: Lowercase attribute name

        Returns:
            The value, or None if the attribute is absent
        """
        return None
