"""pymetafield - Map webhook JSON payloads to flat named content."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pymetafield")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from pymetafield._coercion import coerce
from pymetafield._errors import (
    ConfigurationError,
    InvalidDescriptorError,
    InvalidMetadataTypeError,
    InvalidPayloadError,
    MetadataError,
)
from pymetafield._extractor import FieldExtractor, extract, process, process_all
from pymetafield._paths import resolve_path
from pymetafield.descriptor import FieldDescriptor, ValueType
from pymetafield.entity import ContentSink, EntityObject
from pymetafield.node import MISSING, JsonNode, MissingNode, as_node, parse_json

__all__ = [
    "coerce",
    "extract",
    "process",
    "process_all",
    "resolve_path",
    "as_node",
    "parse_json",
    "FieldExtractor",
    "FieldDescriptor",
    "ValueType",
    "ContentSink",
    "EntityObject",
    "JsonNode",
    "MissingNode",
    "MISSING",
    "MetadataError",
    "ConfigurationError",
    "InvalidDescriptorError",
    "InvalidMetadataTypeError",
    "InvalidPayloadError",
]
