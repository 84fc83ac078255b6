"""Attribute paths — building and resolving dotted/indexed paths.

Paths identify a structural location inside a figure or template and are
the keys used for attribute schema lookups::

    "marker.color"
    "annotations[2].font.size"

Object keys append ``.key`` and sequence indices append ``[index]``.
"""

from __future__ import annotations

import re
from typing import Any

_PART_RE = re.compile(r"([^.\[\]]+)|\[(\d+)\]")


def next_path(parent: Any, key: Any, path: str = "") -> str:
    """Extend ``path`` by ``key``, a child of ``parent``."""
    if not path:
        return str(key)
    if isinstance(parent, (list, tuple)):
        return f"{path}[{key}]"
    return f"{path}.{key}"


def split_path(path: str) -> list[str | int]:
    """Split a path into its parts; bracketed indices become ints.

    >>> split_path("annotations[2].font.size")
    ['annotations', 2, 'font', 'size']
    """
    parts: list[str | int] = []
    for match in _PART_RE.finditer(path or ""):
        key, index = match.groups()
        parts.append(int(index) if index is not None else key)
    return parts


def nested_get(container: Any, path: str, default: Any = None) -> Any:
    """Read the value at ``path``, or ``default`` if any step is missing."""
    node = container
    for part in split_path(path):
        if isinstance(part, int):
            if not isinstance(node, list) or part >= len(node):
                return default
        elif not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node


def nested_set(container: dict, path: str, value: Any) -> None:
    """Write ``value`` at ``path``, creating intermediate containers.

    String parts create dicts and integer parts create lists, padded with
    empty dicts up to the index. Intermediates of the wrong kind are
    replaced.
    """
    parts = split_path(path)
    if not parts or isinstance(parts[0], int):
        return

    node: Any = container
    for part, following in zip(parts, parts[1:]):
        empty: Any = [] if isinstance(following, int) else {}
        if isinstance(part, int):
            _pad(node, part)
            if not isinstance(node[part], type(empty)):
                node[part] = empty
        elif not isinstance(node.get(part), type(empty)):
            node[part] = empty
        node = node[part]

    last = parts[-1]
    if isinstance(last, int):
        _pad(node, last)
    node[last] = value


def _pad(items: list, index: int) -> None:
    while len(items) <= index:
        items.append({})
