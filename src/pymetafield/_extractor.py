"""Descriptor evaluation against JSON payloads."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pymetafield._coercion import coerce, resolve_value_type, should_keep
from pymetafield._paths import resolve_path
from pymetafield.descriptor import FieldDescriptor
from pymetafield.entity import ContentSink, EntityObject
from pymetafield.node import as_node

logger = logging.getLogger(__name__)


def process(sink: ContentSink, root: Any, descriptor: FieldDescriptor) -> None:
    """Extract the value addressed by a descriptor into a sink.

    The descriptor's path is resolved against ``root`` using dot notation,
    the resulting node is coerced to the descriptor's value type, and the
    value is added to ``sink`` under the descriptor's key unless it is
    blank and the descriptor does not keep blank values.

    Args:
        sink: Receives at most one ``add_content`` call.
        root: Decoded JSON document or a node of one.
        descriptor: The mapping entry to evaluate.

    Raises:
        InvalidMetadataTypeError: If the descriptor's value type is unknown.
            Nothing is written in that case.
    """
    kind = resolve_value_type(descriptor.value_type)
    node = resolve_path(root, descriptor.path)
    value = coerce(kind, node)

    if not should_keep(value, descriptor.keep_if_blank):
        logger.debug("Skipping blank value for key %r (path %r)", descriptor.key, descriptor.path)
        return

    logger.debug("Adding content for key %r (path %r)", descriptor.key, descriptor.path)
    sink.add_content(descriptor.key, value)


def process_all(
    sink: ContentSink,
    root: Any,
    descriptors: Iterable[FieldDescriptor],
) -> None:
    """Evaluate descriptors in order; a later write to the same key wins.

    A configuration error stops evaluation at the failing descriptor.
    """
    node = as_node(root)
    for descriptor in descriptors:
        process(sink, node, descriptor)


class FieldExtractor:
    """Reusable mapping definition turning payloads into flat content."""

    def __init__(self, descriptors: Iterable[FieldDescriptor]) -> None:
        self._descriptors = tuple(descriptors)

    @property
    def descriptors(self) -> tuple[FieldDescriptor, ...]:
        return self._descriptors

    def extract(self, document: Any, sink: ContentSink | None = None) -> ContentSink:
        """Apply every descriptor to ``document``.

        Args:
            document: Decoded JSON document or a node of one.
            sink: Destination for the content. A new :class:`EntityObject`
                is used when omitted.

        Returns:
            The sink that received the content.
        """
        if sink is None:
            sink = EntityObject()
        process_all(sink, document, self._descriptors)
        return sink

    def __len__(self) -> int:
        return len(self._descriptors)


def extract(
    document: Any,
    descriptors: Iterable[FieldDescriptor],
    sink: ContentSink | None = None,
) -> ContentSink:
    """Apply ``descriptors`` to ``document`` and return the sink."""
    return FieldExtractor(descriptors).extract(document, sink)
