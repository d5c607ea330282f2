"""Change model: one committed value edit."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ChangeKind(str, Enum):
    TOKEN = "token"
    PROPERTY = "property"


@dataclass(frozen=True)
class Change:
    """A committed edit and the range its new value occupies.

    Attributes:
        id: Session-local identifier (``change-1``, ``change-2``, ...).
        kind: Whether a token or a rule property was edited.
        old_value: The exact text the edit replaced.
        new_value: The text written in its place.
        timestamp: When the edit was applied (UTC).
        applied_range: ``(start, end)`` of the replaced value in the
            snapshot the edit was applied to, or ``None`` if unknown.
        token_name: Target token, for token edits.
        selector: Target rule selector, for property edits.
        property_name: Target property, for property edits.
    """

    id: str
    kind: ChangeKind
    old_value: str
    new_value: str
    timestamp: datetime
    applied_range: tuple[int, int] | None = None
    token_name: str | None = None
    selector: str | None = None
    property_name: str | None = None

    @property
    def target(self) -> str:
        if self.kind is ChangeKind.TOKEN:
            return self.token_name or ""
        return f"{self.selector} {{ {self.property_name} }}"

    def __str__(self) -> str:
        return f"{self.id} [{self.kind.value}] {self.target}: {self.old_value} -> {self.new_value}"
