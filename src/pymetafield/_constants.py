"""Fixed defaults for metadata field extraction."""

COMPONENT = "Common Webhook Dispatcher"
"""Component label attached to every raised error."""

PATH_SEPARATOR = "."
"""Separator between segments of a dot-notation path."""

DEFAULT_BOOLEAN = False
"""Value produced by boolean coercion when the node is not a boolean."""

DEFAULT_TEXT = ""
"""Value produced by text coercion when the node has no textual form."""
