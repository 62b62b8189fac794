"""Coercion of resolved nodes and the keep/discard policy."""

from __future__ import annotations

from typing import Any, Callable

from pymetafield._constants import DEFAULT_BOOLEAN, DEFAULT_TEXT
from pymetafield._errors import ERR_MSG_INVALID_METADATA_TYPE, InvalidMetadataTypeError
from pymetafield.descriptor import ValueType
from pymetafield.node import Node

# Legacy kind names accepted in mapping definitions
_VALUE_TYPE_ALIASES: dict[str, ValueType] = {
    "default": ValueType.TEXT,
}


def resolve_value_type(value_type: Any) -> ValueType:
    """Map a declared coercion kind onto a :class:`ValueType`.

    Raises:
        InvalidMetadataTypeError: If the kind is absent or unknown.
    """
    if isinstance(value_type, ValueType):
        return value_type
    if isinstance(value_type, str):
        name = value_type.strip().lower()
        if name in _VALUE_TYPE_ALIASES:
            return _VALUE_TYPE_ALIASES[name]
        for member in ValueType:
            if member.value == name:
                return member
    raise InvalidMetadataTypeError(
        ERR_MSG_INVALID_METADATA_TYPE,
        f"unknown metadata type {value_type!r}",
    )


def _coerce_boolean(node: Node) -> bool:
    return node.as_boolean(DEFAULT_BOOLEAN)


def _coerce_text(node: Node) -> str:
    return node.as_text(DEFAULT_TEXT)


_COERCIONS: dict[ValueType, Callable[[Node], Any]] = {
    ValueType.BOOLEAN: _coerce_boolean,
    ValueType.TEXT: _coerce_text,
}


def coerce(kind: ValueType, node: Node) -> Any:
    """Convert a resolved node to the scalar for ``kind``.

    Malformed or missing data degrades to the kind's default value.
    """
    return _COERCIONS[resolve_value_type(kind)](node)


def render_text(value: Any) -> str:
    """Textual rendering used to decide whether a value is blank."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def should_keep(value: Any, keep_if_blank: bool) -> bool:
    """Whether a coerced value is written to the sink.

    Booleans always render as non-empty text, so they are kept even when
    ``keep_if_blank`` is false.
    """
    return (value is not None and render_text(value) != "") or keep_if_blank
