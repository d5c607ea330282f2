"""Structural CSS model: tokens, properties, and rules with exact offsets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Layer(str, Enum):
    """Cascade layer a token or rule was declared under."""

    THEME = "theme"
    BASE = "base"
    COMPONENTS = "components"
    UTILITIES = "utilities"
    OTHER = "other"


@dataclass(frozen=True)
class Token:
    """A design variable declaration (``--name: value;``).

    ``start_char``/``end_char`` delimit the value text inside the snapshot
    the token was parsed from. Lines are zero-based.
    """

    name: str
    value: str
    scope: str
    layer: Layer
    start_line: int
    end_line: int
    start_char: int
    end_char: int


@dataclass(frozen=True)
class Property:
    """A single declaration inside a rule body."""

    name: str
    value: str
    start_line: int
    end_line: int
    start_char: int
    end_char: int


@dataclass(frozen=True)
class Rule:
    """A selector block and its declarations in source order.

    Offsets cover the whole block, from the start of the opening line to
    the end of the closing line.
    """

    selector: str
    layer: Layer
    scope: str
    properties: tuple[Property, ...] = ()
    start_line: int = 0
    end_line: int = 0
    start_char: int = 0
    end_char: int = 0
    is_nested: bool = False

    def get_property(self, name: str) -> Property | None:
        """Return the last declaration of *name* (case-insensitive)."""
        wanted = name.lower()
        for prop in reversed(self.properties):
            if prop.name.lower() == wanted:
                return prop
        return None

    def declares(self, name: str) -> bool:
        return self.get_property(name) is not None
