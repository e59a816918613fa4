"""Utility modules for hyperscriptify."""

from .string_utils import to_pascal_case, to_camel_case
from .object_utils import map_keys, map_values, set_path
from .file_utils import read_file, write_file
from .logger import get_logger, set_log_level

__all__ = [
    "to_pascal_case",
    "to_camel_case",
    "map_keys",
    "map_values",
    "set_path",
    "read_file",
    "write_file",
    "get_logger",
    "set_log_level",
]
