"""In-memory holder of the authoritative CSS snapshot."""

from __future__ import annotations

from typing import Callable

from stylepatch.events import EventBus, Subscription, TextChanged, TextLoaded, TextReset
from stylepatch.model import TextDiff


class Document:
    """Original and current CSS text with change notifications.

    Every write replaces the current snapshot as a whole and notifies
    subscribers with the new text.
    """

    def __init__(self, initial: str = "", event_bus: EventBus | None = None) -> None:
        self._original = initial
        self._current = initial
        self.events = event_bus or EventBus()

    @property
    def original_text(self) -> str:
        return self._original

    @property
    def current_text(self) -> str:
        return self._current

    def subscribe(self, callback: Callable[[str], None]) -> Subscription:
        """Call *callback* with the current text after every load, edit, or reset."""
        return self.events.on_all(lambda event: callback(event.text))

    def load(self, text: str) -> None:
        self._original = text
        self._current = text
        self.events.emit(TextLoaded(text))

    def set_current(self, text: str) -> None:
        self._current = text
        self.events.emit(TextChanged(text))

    def reset(self) -> None:
        self._current = self._original
        self.events.emit(TextReset(self._current))

    def has_changes(self) -> bool:
        return self._current != self._original

    def diff(self) -> TextDiff:
        """Compare original and current text line by line, by position."""
        original_lines = self._original.split("\n")
        current_lines = self._current.split("\n")
        added: list[str] = []
        removed: list[str] = []
        modified: list[str] = []
        for i in range(max(len(original_lines), len(current_lines))):
            old = original_lines[i] if i < len(original_lines) else ""
            new = current_lines[i] if i < len(current_lines) else ""
            if old == new:
                continue
            if not old:
                added.append(new)
            elif not new:
                removed.append(old)
            else:
                modified.append(f"{old} → {new}")
        return TextDiff(added=tuple(added), removed=tuple(removed), modified=tuple(modified))
