"""
Attribute name to prop name mappings.
"""

from typing import Dict, Optional


class PropNameMappings:
    """Override tables for renaming HTML attributes to props."""

    # Attributes that strict host libraries (React) refuse under their HTML names
    REACT_ELEMENT_PROP_NAMES = {
        "class": "className",
        "for": "htmlFor",
        "tabindex": "tabIndex",
        "readonly": "readOnly",
        "maxlength": "maxLength",
        "minlength": "minLength",
        "colspan": "colSpan",
        "rowspan": "rowSpan",
        "contenteditable": "contentEditable",
        "crossorigin": "crossOrigin",
        "autocomplete": "autoComplete",
        "autofocus": "autoFocus",
        "enctype": "encType",
        "srcset": "srcSet",
        "accept-charset": "acceptCharset",
        "http-equiv": "httpEquiv",
    }

    # Components usually want the same names as React elements for these two
    REACT_COMPONENT_PROP_NAMES = {
        "class": "className",
        "for": "htmlFor",
    }

    def __init__(
        self,
        element_prop_names: Optional[Dict[str, str]] = None,
        component_prop_names: Optional[Dict[str, str]] = None,
    ):
        self.element_prop_names = dict(
            self.REACT_ELEMENT_PROP_NAMES if element_prop_names is None else element_prop_names
        )
        self.component_prop_names = dict(
            self.REACT_COMPONENT_PROP_NAMES if component_prop_names is None else component_prop_names
        )

    def get_element_prop_name(self, attribute: str) -> str:
        """Get the prop name for an attribute of an intrinsic element."""
        return self.element_prop_names.get(attribute, attribute)

    def get_component_prop_name(self, attribute: str) -> Optional[str]:
        """Get the explicit prop name for a component attribute, if any."""
        return self.component_prop_names.get(attribute)
