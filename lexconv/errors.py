"""Exception raised when a value cannot be interpreted as the requested type."""

from __future__ import annotations

from typing import Any

_MESSAGE = "bad lexical cast: source type value could not be interpreted as target"


class BadLexicalCast(ValueError):
    """A source value could not be interpreted as the target type.

    ``source_type`` and ``target_type`` describe the two sides of the failed
    conversion; both default to ``None`` when they are not known.
    """

    def __init__(self, source_type: Any = None, target_type: Any = None) -> None:
        super().__init__(_MESSAGE)
        self.source_type = source_type
        self.target_type = target_type

    def __str__(self) -> str:
        return _MESSAGE

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source_type={self.source_type!r}, "
            f"target_type={self.target_type!r})"
        )