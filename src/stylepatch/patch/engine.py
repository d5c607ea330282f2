"""Positional patch engine: value edits by exact character-range splicing.

The engine never reformats text. Each edit replaces exactly the value span
of one declaration and records where it did so, which makes undo and redo
plain splices at the recorded offset.

Offsets are absolute, so undo and redo are only exact inverses when used
in stack order on the snapshot the previous operation produced. Both
re-check the target range first and raise ``PatchConflictError`` rather
than splice into text that has moved.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

from stylepatch.model import Change, ChangeKind, Property, Rule, Token
from stylepatch.parser.parser import strip_comments
from stylepatch.parser.patterns import declaration_re
from stylepatch.patch.errors import PatchConflictError, PatchError, StaleModelError

__all__ = [
    "PatchEngine",
    "PatchResult",
    "TextPatch",
    "UndoResult",
    "apply_patches",
    "splice",
]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatchResult:
    """New snapshot text plus the change that produced it."""

    text: str
    change: Change


@dataclass(frozen=True)
class UndoResult:
    """Text with the last change reverted, and that change for a redo stack."""

    text: str
    removed_change: Change


@dataclass(frozen=True)
class TextPatch:
    start: int
    end: int
    new_text: str


def splice(text: str, start: int, end: int, new_text: str) -> str:
    """Replace ``text[start:end]`` with *new_text*."""
    return text[:start] + new_text + text[end:]


def apply_patches(text: str, patches: Iterable[TextPatch]) -> str:
    """Apply several splices, last offset first so earlier offsets stay valid."""
    ordered = sorted(patches, key=lambda p: p.start, reverse=True)
    limit = len(text)
    for patch in ordered:
        if not 0 <= patch.start <= patch.end <= limit:
            raise PatchError(
                f"Patch range [{patch.start}, {patch.end}) overlaps another patch "
                "or falls outside the text",
                span=(patch.start, patch.end),
            )
        text = splice(text, patch.start, patch.end, patch.new_text)
        limit = patch.start
    return text


def _line_bounds(text: str, line_no: int) -> tuple[int, int] | None:
    start = 0
    for _ in range(line_no):
        newline = text.find("\n", start)
        if newline == -1:
            return None
        start = newline + 1
    end = text.find("\n", start)
    return start, len(text) if end == -1 else end


def _locate_value(text: str, name: str, line_no: int, recorded: tuple[int, int]) -> tuple[int, int]:
    """Find the value span of declaration *name* on line *line_no*.

    The span must equal the *recorded* one; anything else means the model
    was parsed from a different snapshot.
    """
    masked = strip_comments(text)
    bounds = _line_bounds(masked, line_no)
    if bounds is None:
        raise StaleModelError(f"Line {line_no} does not exist in the text", line=line_no)
    line_start, line_end = bounds
    for match in declaration_re(name).finditer(masked, line_start, line_end):
        span = (match.start("value"), match.end("value"))
        if span == recorded:
            return span
    raise StaleModelError(
        f"Cannot find value of {name!r} at [{recorded[0]}, {recorded[1]}) on line {line_no}",
        line=line_no,
        span=recorded,
    )


class PatchEngine:
    """Applies token and property edits and keeps the change log.

    The engine holds no text. Callers pass the current snapshot in and get
    the new one back. Undone changes are not stored here; the caller keeps
    them and hands them back to :meth:`redo`.
    """

    def __init__(self) -> None:
        self._changes: list[Change] = []
        self._ids = itertools.count(1)

    # --- edits ----------------------------------------------------------------

    def edit_token(
        self, text: str, token: Token, new_value: str, old_value: str | None = None
    ) -> PatchResult:
        start, end = _locate_value(
            text, token.name, token.start_line, (token.start_char, token.end_char)
        )
        current = self._check_old_value(text, start, end, old_value, token.start_line)
        change = Change(
            id=self._next_id(),
            kind=ChangeKind.TOKEN,
            old_value=current,
            new_value=new_value,
            timestamp=datetime.now(timezone.utc),
            applied_range=(start, end),
            token_name=token.name,
        )
        return self._commit(text, change)

    def edit_property(
        self,
        text: str,
        rule: Rule,
        prop: Property,
        new_value: str,
        old_value: str | None = None,
    ) -> PatchResult:
        start, end = _locate_value(
            text, prop.name, prop.start_line, (prop.start_char, prop.end_char)
        )
        current = self._check_old_value(text, start, end, old_value, prop.start_line)
        change = Change(
            id=self._next_id(),
            kind=ChangeKind.PROPERTY,
            old_value=current,
            new_value=new_value,
            timestamp=datetime.now(timezone.utc),
            applied_range=(start, end),
            selector=rule.selector,
            property_name=prop.name,
        )
        return self._commit(text, change)

    # --- history --------------------------------------------------------------

    def undo(self, text: str) -> UndoResult | None:
        """Revert the most recent change.

        Returns None when there is nothing to undo or the change carries no
        range. The removed change is returned for the caller's redo stack.
        """
        if not self._changes:
            return None
        change = self._changes[-1]
        if change.applied_range is None:
            return None
        start = change.applied_range[0]
        self._expect(text, start, change.new_value, change)
        self._changes.pop()
        log.info("Undid %s", change)
        return UndoResult(
            text=splice(text, start, start + len(change.new_value), change.old_value),
            removed_change=change,
        )

    def redo(self, text: str, change: Change) -> PatchResult | None:
        """Re-apply a change previously returned by :meth:`undo`."""
        if change.applied_range is None:
            return None
        start = change.applied_range[0]
        self._expect(text, start, change.old_value, change)
        self._changes.append(change)
        log.info("Redid %s", change)
        return PatchResult(
            text=splice(text, start, start + len(change.old_value), change.new_value),
            change=change,
        )

    def changes(self) -> list[Change]:
        return list(self._changes)

    def reset(self) -> None:
        self._changes.clear()

    # --- internals ------------------------------------------------------------

    def _next_id(self) -> str:
        return f"change-{next(self._ids)}"

    def _commit(self, text: str, change: Change) -> PatchResult:
        start, end = change.applied_range  # type: ignore[misc]
        self._changes.append(change)
        log.info("Applied %s at [%d, %d)", change, start, end)
        return PatchResult(text=splice(text, start, end, change.new_value), change=change)

    @staticmethod
    def _check_old_value(
        text: str, start: int, end: int, old_value: str | None, line: int
    ) -> str:
        current = text[start:end]
        if old_value is not None and old_value != current:
            raise StaleModelError(
                f"Expected value {old_value!r} but found {current!r}",
                line=line,
                span=(start, end),
            )
        return current

    @staticmethod
    def _expect(text: str, start: int, expected: str, change: Change) -> None:
        found = text[start : start + len(expected)]
        if found != expected:
            raise PatchConflictError(
                f"{change.id}: expected {expected!r} at offset {start}, found {found!r}",
                span=(start, start + len(expected)),
            )
