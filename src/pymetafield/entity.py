"""Output sinks for extracted content."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ContentSink(Protocol):
    """Anything that accepts named content; the last write for a key wins."""

    def add_content(self, key: str, value: Any) -> None: ...


class EntityObject:
    """Flat key/value container accumulated across descriptor evaluations."""

    def __init__(self, type: str = "", version: str = "1.0") -> None:
        self.type = type
        self.version = version
        self._content: dict[str, Any] = {}

    def add_content(self, key: str, value: Any) -> None:
        self._content[key] = value

    @property
    def content(self) -> dict[str, Any]:
        return dict(self._content)

    def get(self, key: str, default: Any = None) -> Any:
        return self._content.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "version": self.version,
            "content": dict(self._content),
        }

    def __contains__(self, key: object) -> bool:
        return key in self._content

    def __len__(self) -> int:
        return len(self._content)

    def __repr__(self) -> str:
        return f"EntityObject(type={self.type!r}, content={self._content!r})"
