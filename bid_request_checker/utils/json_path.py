"""Path-addressed access to nested JSON documents.

Paths use ``.`` for object keys and ``[n]`` for array indexes, so
``imp[0].banner.w`` and ``imp.0.banner.w`` address the same value.
"""

import re
from typing import Any

from bid_request_checker.errors import PathConflictError

_BRACKET_INDEX = re.compile(r"\[(\d+)\]")
_INDEX_SEGMENT = re.compile(r"[0-9]+")


class _Missing:
    """Marker for a path that does not resolve to a value."""

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def parse_path(path: str) -> list[str]:
    """
    Split a path into its segments.

    Args:
        path (str): Path such as ``imp[0].bidfloor``.

    Returns:
        list[str]: Segments such as ``["imp", "0", "bidfloor"]``.
    """
    return _BRACKET_INDEX.sub(r".\1", path).split(".")


def is_index(segment: str) -> bool:
    """Check whether a segment addresses an array element."""
    return _INDEX_SEGMENT.fullmatch(segment) is not None


def container_for(next_segment: str) -> dict | list:
    """Build the empty container that can hold ``next_segment``."""
    return [] if is_index(next_segment) else {}


def _child(container: Any, segment: str) -> Any:
    if isinstance(container, dict):
        return container.get(segment, MISSING)
    if isinstance(container, list) and is_index(segment):
        index = int(segment)
        if index < len(container):
            return container[index]
    return MISSING


def _assign(container: Any, segment: str, value: Any, path: str) -> None:
    if isinstance(container, dict):
        container[segment] = value
        return
    if isinstance(container, list) and is_index(segment):
        index = int(segment)
        if index >= len(container):
            container.extend([None] * (index + 1 - len(container)))
        container[index] = value
        return
    raise PathConflictError(path, segment, container)


def _descend_creating(document: Any, segments: list[str], path: str) -> Any:
    """Walk all but the last segment, creating missing containers."""
    current = document
    for segment, next_segment in zip(segments, segments[1:]):
        child = _child(current, segment)
        if child is MISSING:
            child = container_for(next_segment)
            _assign(current, segment, child, path)
        elif not isinstance(child, (dict, list)):
            raise PathConflictError(path, next_segment, child)
        current = child
    return current


def get_value(document: Any, path: str) -> Any:
    """
    Read the value at a path.

    Never raises: a missing key, an out-of-range index or a descent into a
    scalar all give ``MISSING``. A key holding ``None`` is present.

    Args:
        document (Any): Nested dicts and lists.
        path (str): Path to read.

    Returns:
        Any: The stored value, or ``MISSING``.
    """
    current = document
    for segment in parse_path(path):
        current = _child(current, segment)
        if current is MISSING:
            return MISSING
    return current


def has_path(document: Any, path: str) -> bool:
    """Check whether a path resolves to a value (``None`` included)."""
    return get_value(document, path) is not MISSING


def set_value(document: Any, path: str, value: Any) -> None:
    """
    Write a value at a path, creating intermediate containers.

    Each missing intermediate becomes a list when the following segment is an
    index and a dict otherwise. Writing past the end of a list pads it with
    ``None``.

    Args:
        document (Any): Nested dicts and lists, mutated in place.
        path (str): Path to write.
        value (Any): Value to store.

    Raises:
        PathConflictError: If the path runs through a scalar, or uses a key
            on a list.
    """
    segments = parse_path(path)
    parent = _descend_creating(document, segments, path)
    _assign(parent, segments[-1], value, path)


def append_value(document: Any, path: str, value: Any) -> None:
    """
    Like ``set_value``, but pushes onto the parent when the parent is a list.

    Args:
        document (Any): Nested dicts and lists, mutated in place.
        path (str): Path whose parent receives the value.
        value (Any): Value to store.

    Raises:
        PathConflictError: If the path runs through a scalar.
    """
    segments = parse_path(path)
    parent = _descend_creating(document, segments, path)
    if isinstance(parent, list):
        parent.append(value)
    else:
        _assign(parent, segments[-1], value, path)


def remove_value(document: Any, path: str) -> None:
    """Delete the value at a path; a path that does not resolve is left alone."""
    segments = parse_path(path)
    parent = document
    for segment in segments[:-1]:
        parent = _child(parent, segment)
        if parent is MISSING:
            return

    last = segments[-1]
    if isinstance(parent, dict):
        parent.pop(last, None)
    elif isinstance(parent, list) and is_index(last) and int(last) < len(parent):
        del parent[int(last)]
