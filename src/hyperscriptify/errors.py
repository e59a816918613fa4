"""
Exceptions raised by hyperscriptify.

Conversion itself never fails on the shape of the input tree; these cover
the depth guard and the command line front end. Exceptions raised by the
caller's h(), component registry or propsify function are not wrapped.
"""


class HyperscriptifyError(Exception):
    """Base class for hyperscriptify errors."""


class MaxDepthExceededError(HyperscriptifyError):
    """Raised when the source tree is nested deeper than the allowed depth."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Source tree is nested deeper than {max_depth} levels")


class TemplateNotFoundError(HyperscriptifyError):
    """Raised when a requested <template> element is not in the document."""

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(f"No <template> element with id '{template_id}'")
