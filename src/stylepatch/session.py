"""Editing session: one document, its parsed model, and edit history."""

from __future__ import annotations

import logging
from typing import Iterable

from stylepatch.cascade import create_selection
from stylepatch.config import StylepatchConfig
from stylepatch.document import Document
from stylepatch.model import Change, ParsedModel, Selection
from stylepatch.parser import get_rule, get_token, parse_css
from stylepatch.patch import PatchEngine

log = logging.getLogger(__name__)


class EditorSession:
    """Wires a Document to the parser, the cascade resolver, and a PatchEngine.

    The model is re-parsed from the document's current text after every
    load, edit, undo, redo, or reset, so it always matches the snapshot it
    is used against. Edits are serialized by the caller; undo and redo
    follow stack order.
    """

    def __init__(
        self, document: Document | None = None, config: StylepatchConfig | None = None
    ) -> None:
        self.config = config or StylepatchConfig()
        self.document = document or Document()
        self.engine = PatchEngine()
        self.selection: Selection | None = None
        self._undone: list[Change] = []
        self._model = parse_css(self.document.current_text, self.config)
        self._subscription = self.document.subscribe(self._on_text)

    @property
    def model(self) -> ParsedModel:
        return self._model

    @property
    def text(self) -> str:
        return self.document.current_text

    @property
    def history(self) -> list[Change]:
        return self.engine.changes()

    @property
    def can_undo(self) -> bool:
        return bool(self.engine.changes())

    @property
    def can_redo(self) -> bool:
        return bool(self._undone)

    def _on_text(self, text: str) -> None:
        self._model = parse_css(text, self.config)
        if self.selection is not None:
            self.selection = create_selection(self._model, self.selection.classes)

    # --- lifecycle ------------------------------------------------------------

    def load(self, text: str) -> None:
        self.engine.reset()
        self._undone.clear()
        self.selection = None
        self.document.load(text)
        log.debug(
            "Loaded %d tokens and %d rules", len(self._model.tokens), len(self._model.rules)
        )

    def reset(self) -> None:
        self.engine.reset()
        self._undone.clear()
        self.selection = None
        self.document.reset()

    def close(self) -> None:
        self._subscription.unsubscribe()

    # --- editing --------------------------------------------------------------

    def edit_token(self, name: str, new_value: str, scope: str | None = None) -> Change:
        token = get_token(self._model, name, scope)
        if token is None:
            raise KeyError(f"Unknown token: {name}")
        result = self.engine.edit_token(self.text, token, new_value, token.value)
        self._undone.clear()
        self.document.set_current(result.text)
        return result.change

    def edit_property(self, selector: str, property_name: str, new_value: str) -> Change:
        rule = get_rule(self._model, selector)
        if rule is None:
            raise KeyError(f"Unknown selector: {selector}")
        prop = rule.get_property(property_name)
        if prop is None:
            raise KeyError(f"{selector} does not declare {property_name}")
        result = self.engine.edit_property(self.text, rule, prop, new_value, prop.value)
        self._undone.clear()
        self.document.set_current(result.text)
        return result.change

    def undo(self) -> Change | None:
        result = self.engine.undo(self.text)
        if result is None:
            return None
        self._undone.append(result.removed_change)
        self.document.set_current(result.text)
        return result.removed_change

    def redo(self) -> Change | None:
        if not self._undone:
            return None
        result = self.engine.redo(self.text, self._undone[-1])
        if result is None:
            return None
        self._undone.pop()
        self.document.set_current(result.text)
        return result.change

    # --- inspection -----------------------------------------------------------

    def select(self, classes: Iterable[str]) -> Selection | None:
        self.selection = create_selection(self._model, classes)
        return self.selection

    def clear_selection(self) -> None:
        self.selection = None
