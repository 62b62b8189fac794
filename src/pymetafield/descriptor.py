"""Descriptor types for metadata field extraction."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pymetafield._errors import ERR_MSG_INVALID_KEY, InvalidDescriptorError


class ValueType(enum.Enum):
    """Coercion applied to the node a descriptor resolves to."""

    BOOLEAN = "boolean"
    TEXT = "text"


@dataclass(frozen=True)
class FieldDescriptor:
    """Maps one dot-notation path of a JSON payload to a named attribute.

    Equivalent of a mapping entry such as::

        <field key="header" value="content.header" />

    ``value_type`` may be a :class:`ValueType` or its name as a string. It
    is checked when the descriptor is evaluated, not here.
    """

    key: str
    path: str
    value_type: ValueType | str | None = ValueType.TEXT
    keep_if_blank: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise InvalidDescriptorError(
                ERR_MSG_INVALID_KEY,
                f"descriptor for path {self.path!r} has an empty key",
            )
