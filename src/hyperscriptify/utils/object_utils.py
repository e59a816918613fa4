"""
Dictionary helpers used by the props strategies.

These are small pure functions so that callers can swap any of them out
when their host framework expects a different key or value convention.
"""

from typing import Any, Callable, Dict, List, Mapping

PATH_SEPARATOR = "."


def map_keys(mapping: Mapping[str, Any], fn: Callable[[Any, str], str]) -> Dict[str, Any]:
    """
    Return a new dict with every key replaced by fn(value, key).

    Later entries win when two keys map to the same name.
    """
    return {fn(value, key): value for key, value in mapping.items()}


def map_values(mapping: Mapping[str, Any], fn: Callable[[Any, str], Any]) -> Dict[str, Any]:
    """Return a new dict with every value replaced by fn(value, key)."""
    return {key: fn(value, key) for key, value in mapping.items()}


def split_path(path: str) -> List[str]:
    """Split a dotted path, ignoring empty segments ("a..b" == "a.b")."""
    return [segment for segment in path.split(PATH_SEPARATOR) if segment]


def set_path(target: Dict[str, Any], path: str, value: Any) -> Dict[str, Any]:
    """
    Assign value at a dotted path inside target, creating dicts as needed.

    set_path(props, "a.b", x) leaves props["a"]["c"] alone if it exists.
    An intermediate value that is not a dict is replaced by a new dict.
    A path without any usable segment is stored under the raw key.

    Returns:
        target, mutated in place
    """
    segments = split_path(path)
    if not segments:
        target[path] = value
        return target

    current = target
    for segment in segments[:-1]:
        nested = current.get(segment)
        if not isinstance(nested, dict):
            nested = {}
            current[segment] = nested
        current = nested

    current[segments[-1]] = value
    return target
