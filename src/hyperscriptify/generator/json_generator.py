"""
JSON generator for descriptor trees.
Converts VElement trees -> plain data -> JSON text.
"""

import json
from typing import Any, Mapping

from .hyperscript import Fragment, VElement
from ..utils.logger import get_logger

logger = get_logger(__name__)

FRAGMENT_NAME = "#fragment"


class JSONGenerator:
    """Generates JSON from VElement descriptor trees."""

    def generate(self, descriptor: Any, indent: int = 2) -> str:
        """
        Generate JSON text.

        Args:
            descriptor: Root descriptor (or None for an empty conversion)
            indent: Indentation passed to json.dumps

        Returns:
            JSON string
        """
        data = self.to_data(descriptor)
        logger.debug("Serialising descriptor tree to JSON")
        return json.dumps(data, indent=indent, ensure_ascii=False)

    # --------------------------------------------------------------------
    # DESCRIPTORS
    # --------------------------------------------------------------------

    def to_data(self, descriptor: Any) -> Any:
        """Convert a descriptor tree into dicts, lists and scalars."""
        if isinstance(descriptor, VElement):
            return {
                "type": self._type_name(descriptor.type),
                "props": self._props_to_data(descriptor.props),
                "children": [self.to_data(child) for child in descriptor.children],
            }
        if isinstance(descriptor, (list, tuple)):
            return [self.to_data(item) for item in descriptor]
        if isinstance(descriptor, Mapping):
            return self._props_to_data(descriptor)
        if descriptor is None or isinstance(descriptor, (str, int, float, bool)):
            return descriptor
        return str(descriptor)

    def _props_to_data(self, props: Mapping[str, Any]) -> dict:
        return {str(key): self.to_data(value) for key, value in props.items()}

    # --------------------------------------------------------------------
    # TYPES
    # --------------------------------------------------------------------

    def _type_name(self, type_or_tag: Any) -> str:
        if type_or_tag is Fragment:
            return FRAGMENT_NAME
        if isinstance(type_or_tag, str):
            return type_or_tag
        # Components: classes and functions by name, anything else by str()
        return getattr(type_or_tag, "__name__", None) or str(type_or_tag)
