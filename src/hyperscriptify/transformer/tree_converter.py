"""
Converts a markup tree (what an HTML parser produces) into a hyperscript
element tree (what JSX compiles to).

Given this markup inside a <template>:

    <my-component>
      <span>hello world</span>
    </my-component>
    <div>goodbye</div>

and components = {"my-component": MyComponent}, converting the template's
content with Preact's h and Fragment gives the equivalent of:

    <>
      <MyComponent>
        <span>hello world</span>
      </MyComponent>
      <div>goodbye</div>
    </>

This lets components of a JSX framework be used inside pages rendered by
something else entirely.

Child elements with a slot="name" attribute are passed to a parent
component as props["name"] instead of as positional children.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from .propsify import Propsify, PropsifyContext
from ..errors import MaxDepthExceededError
from ..source.node_interface import NodeType, SourceNode
from ..utils.logger import get_logger

logger = get_logger(__name__)

SLOT_ATTRIBUTE = "slot"

# Kept well below Python's default recursion limit
DEFAULT_MAX_DEPTH = 500


def hyperscriptify(
    node: SourceNode,
    h: Callable[..., Any],
    fragment: Any,
    components: Mapping[str, Any],
    propsify: Optional[Propsify] = None,
    *,
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> Any:
    """
    Convert an element or fragment into the result of calling h().

    Args:
        node: An element or document fragment. Any other node gives None.
        h: Hyperscript function with signature (tag_or_component, props, *children),
            e.g. Preact's h() or React's createElement().
        fragment: What <>...</> compiles to; used as the type of fragment nodes.
        components: Lowercase tag name -> component. Tags not in here are
            passed to h() as strings.
        propsify: Optional function (attributes, slots, context) -> props for
            element nodes. Without one, props are the attributes with the
            slots merged over them.
        max_depth: Deepest nesting allowed, or None for no limit.

    Returns:
        What h() returned, or None if node is not an element or fragment.

    Raises:
        MaxDepthExceededError: If the tree is nested deeper than max_depth.
    """
    return _convert(node, h, fragment, components, propsify, max_depth, 0)


def _convert(
    node: SourceNode,
    h: Callable[..., Any],
    fragment: Any,
    components: Mapping[str, Any],
    propsify: Optional[Propsify],
    max_depth: Optional[int],
    depth: int,
) -> Any:
    if max_depth is not None and depth > max_depth:
        raise MaxDepthExceededError(max_depth)

    # Basic info about the element or fragment
    element: Optional[SourceNode] = None
    tag_name: Optional[str] = None
    node_type = node.node_type
    if node_type == NodeType.ELEMENT:
        element = node
        tag_name = element.node_name.lower()
        component = components.get(tag_name)
        attributes: Dict[str, str] = {
            name: element.get_attribute(name) for name in element.attribute_names()
        }
    elif node_type == NodeType.DOCUMENT_FRAGMENT:
        component = fragment
        attributes = {}
    else:
        return None

    # Slots and children
    slots: Dict[str, Any] = {}
    children: List[Any] = []
    for child_node in node.child_nodes:
        child_type = child_node.node_type
        if child_type == NodeType.TEXT:
            child = child_node.node_value
        elif child_type == NodeType.ELEMENT:
            slot = child_node.get_attribute(SLOT_ATTRIBUTE)
            child = _convert(
                child_node, h, fragment, components, propsify, max_depth, depth + 1
            )
            if element is not None and component and slot:
                logger.debug(f"Routing <{child_node.node_name.lower()}> into slot '{slot}' of <{tag_name}>")
                slots[slot] = child
                child = None
        else:
            child = None

        # Unsupported nodes give None and empty text gives ""; neither is a child
        if child is None or (isinstance(child, str) and not child):
            continue
        children.append(child)

    # A slot attribute that was used to route this element into its parent
    # component's props must not also end up in this element's own props
    if attributes.get(SLOT_ATTRIBUTE) and _parent_is_component(element, components):
        del attributes[SLOT_ATTRIBUTE]

    if element is not None and propsify is not None:
        context = PropsifyContext(tag_name=tag_name, component=component, element=element)
        props = propsify(attributes, slots, context)
    else:
        props = {**attributes, **slots}

    return h(component or tag_name, props, *children)


def _parent_is_component(element: Optional[SourceNode], components: Mapping[str, Any]) -> bool:
    if element is None:
        return False
    parent = element.parent_node
    if parent is None or parent.node_type != NodeType.ELEMENT:
        return False
    return bool(components.get(parent.node_name.lower()))
