"""Descriptor construction and output."""

from .hyperscript import Fragment, VElement, h
from .json_generator import JSONGenerator

__all__ = ["Fragment", "VElement", "h", "JSONGenerator"]
