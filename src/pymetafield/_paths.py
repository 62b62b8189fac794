"""Dot-notation path splitting and resolution."""

from __future__ import annotations

from typing import Any

from pymetafield._constants import PATH_SEPARATOR
from pymetafield.node import Node, as_node


def split_path(path: str) -> list[str]:
    """Split a dot-notation path into field names.

    An empty path has no segments. Segments are literal field names; empty
    segments between consecutive dots are kept and address the ``""`` key.
    """
    if not path:
        return []
    return path.split(PATH_SEPARATOR)


def resolve_path(root: Any, path: str) -> Node:
    """Navigate to the node addressed by ``path``.

    Example: for ``{"content": {"header": "hello", "body": "world"}}`` the
    header is addressed by ``"content.header"``.

    Returns MISSING when any segment is absent; the walk never raises.
    """
    node = as_node(root)
    for segment in split_path(path):
        node = node.get_child(segment)
    return node
