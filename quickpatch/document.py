"""
Text surfaces a diff can be applied to.

The applier needs only two operations from its target, so anything with
`find_first` and `replace_at` (an editor buffer wrapper, a rope, ...) can be
patched. `TextDocument` is the plain in-memory implementation.
"""
from __future__ import annotations

from typing import Optional, Protocol

__all__ = ["Document", "TextDocument"]


class Document(Protocol):
    def find_first(self, needle: str) -> Optional[int]:
        """Offset of the first occurrence of `needle` from the start, or None."""
        ...

    def replace_at(self, position: int, matched_length: int, replacement: str) -> None:
        """Replace `matched_length` characters at `position` with `replacement`."""
        ...


class TextDocument:
    """Mutable document backed by a Python string."""

    def __init__(self, text: str = ""):
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def find_first(self, needle: str) -> Optional[int]:
        pos = self._text.find(needle)
        return pos if pos != -1 else None

    def replace_at(self, position: int, matched_length: int, replacement: str) -> None:
        end = position + matched_length
        if position < 0 or matched_length < 0 or end > len(self._text):
            raise ValueError(
                f"span [{position}:{end}] is outside a document of length {len(self._text)}"
            )
        # Slicing keeps `replacement` literal; no backreference expansion.
        self._text = self._text[:position] + replacement + self._text[end:]

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"TextDocument({self._text!r})"
