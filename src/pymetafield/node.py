"""Read-only JSON tree view used during field extraction.

A tree is made of :class:`JsonNode` instances wrapping decoded JSON values
and the :data:`MISSING` marker returned whenever a child does not exist.
Both variants support the same capability set, so walking a path and
reading a value from the result never needs a ``None`` check.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

from pymetafield._errors import ERR_MSG_INVALID_PAYLOAD, InvalidPayloadError

__all__ = [
    "MISSING",
    "JsonNode",
    "MissingNode",
    "Node",
    "as_node",
    "parse_json",
]


class MissingNode:
    """Placeholder for a node that is not present in the tree."""

    __slots__ = ()

    is_missing = True

    def has_child(self, name: str) -> bool:
        return False

    def get_child(self, name: str) -> MissingNode:
        return self

    def as_boolean(self, default: bool = False) -> bool:
        return default

    def as_text(self, default: str = "") -> str:
        return default

    def __repr__(self) -> str:
        return "MISSING"


MISSING = MissingNode()


@dataclass(frozen=True)
class JsonNode:
    """A present node wrapping a decoded JSON value.

    ``value`` is one of ``dict`` (object), ``list`` (array), ``str``,
    ``bool``, ``int``, ``float`` or ``None`` (JSON null). The wrapped value
    is never modified.
    """

    value: Any

    is_missing = False

    @property
    def is_object(self) -> bool:
        return isinstance(self.value, dict)

    @property
    def is_null(self) -> bool:
        return self.value is None

    def has_child(self, name: str) -> bool:
        return isinstance(self.value, dict) and name in self.value

    def get_child(self, name: str) -> Node:
        """Return the named child, or MISSING if there is no such field.

        Arrays and scalars have no named children.
        """
        if isinstance(self.value, dict) and name in self.value:
            return JsonNode(self.value[name])
        return MISSING

    def as_boolean(self, default: bool = False) -> bool:
        """Interpret the node as a boolean.

        Booleans map to themselves, integers to ``value != 0`` and strings
        whose trimmed text is ``"true"`` or ``"false"`` to that boolean.
        Everything else yields ``default``.
        """
        value = self.value
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return value != 0
        if isinstance(value, str):
            text = value.strip()
            if text == "true":
                return True
            if text == "false":
                return False
        return default

    def as_text(self, default: str = "") -> str:
        """Return the textual form of the node.

        Containers have an empty textual form. JSON null and values
        without a JSON text form yield ``default``.
        """
        value = self.value
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return repr(value)
        if isinstance(value, (dict, list)):
            return ""
        return default


Node = Union[JsonNode, MissingNode]


def as_node(document: Any) -> Node:
    """Wrap a decoded JSON document, passing existing nodes through."""
    if isinstance(document, (JsonNode, MissingNode)):
        return document
    return JsonNode(document)


def parse_json(payload: str | bytes) -> JsonNode:
    """Decode a raw webhook payload into a tree.

    Raises:
        InvalidPayloadError: If the payload is not valid JSON.
    """
    try:
        return JsonNode(json.loads(payload))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidPayloadError(
            ERR_MSG_INVALID_PAYLOAD,
            f"payload could not be decoded: {e}",
            wrapped=e,
        ) from e
