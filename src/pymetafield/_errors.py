"""Exception hierarchy for metadata field extraction."""

from __future__ import annotations

from pymetafield._constants import COMPONENT


class MetadataError(Exception):
    """Base exception for metadata field extraction errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging. Every error carries the component
    label of the webhook dispatcher that raised it.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        component: str = COMPONENT,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped
        self.component = component

    def internal(self) -> str:
        return self.internal_details


class ConfigurationError(MetadataError):
    """Raised when a mapping definition is broken.

    Unlike missing or mismatched payload data, this is never degraded to
    a default value.
    """


class InvalidMetadataTypeError(ConfigurationError):
    """Raised when a descriptor names an unknown coercion kind."""


class InvalidDescriptorError(ConfigurationError):
    """Raised when a descriptor field is malformed."""


class InvalidPayloadError(MetadataError):
    """Raised when a raw webhook payload is not valid JSON."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_METADATA_TYPE = "Invalid type in metadata."
ERR_MSG_INVALID_KEY = "Invalid key in metadata."
ERR_MSG_INVALID_PAYLOAD = "Invalid JSON payload."
