"""
Reference hyperscript function.

Any framework's h()/createElement() can be passed to hyperscriptify(). This
module provides a framework-neutral one that builds immutable VElement
descriptors, used by the CLI and handy in tests.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple


class _FragmentType:
    """Marker type for fragments (what <>...</> compiles to)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Fragment"

    def __reduce__(self):
        return (_FragmentType, ())


Fragment = _FragmentType()


@dataclass(frozen=True, eq=False)
class VElement:
    """What to render: a tag name or component, its props and its children."""

    type: Any
    props: Mapping[str, Any] = field(default_factory=dict)
    children: Tuple[Any, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "props", MappingProxyType(dict(self.props)))
        object.__setattr__(self, "children", tuple(self.children))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, VElement):
            return NotImplemented
        return (
            self.type == other.type
            and dict(self.props) == dict(other.props)
            and self.children == other.children
        )

    __hash__ = None


def h(type_or_tag: Any, props: Optional[Mapping[str, Any]] = None, *children: Any) -> VElement:
    """
    Build a VElement.

    Args:
        type_or_tag: Tag name string, component, or Fragment
        props: Props mapping (None means no props)
        *children: Child descriptors and strings

    Returns:
        The descriptor
    """
    return VElement(type_or_tag, props or {}, children)
