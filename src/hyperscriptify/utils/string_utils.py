"""
String utility functions.
"""

import re


def to_pascal_case(text: str) -> str:
    """Convert string to PascalCase."""
    # Split on anything that is not a letter or digit, in any script
    words = re.findall(r"[^\W_]+", text)
    return "".join(word.capitalize() for word in words)


def to_camel_case(text: str) -> str:
    """
    Convert an attribute name to camelCase.

    "data-user-id" -> "dataUserId", "max_items" -> "maxItems".
    Names that are already a single lowercase word are returned unchanged.
    """
    pascal = to_pascal_case(text)
    if not pascal:
        return ""
    return pascal[0].lower() + pascal[1:]
