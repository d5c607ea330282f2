"""Event types emitted when the authoritative CSS snapshot changes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextLoaded:
    text: str


@dataclass(frozen=True)
class TextChanged:
    text: str


@dataclass(frozen=True)
class TextReset:
    text: str
