"""Parse result for one snapshot of CSS text."""

from __future__ import annotations

from dataclasses import dataclass, field

from stylepatch.model.token import Layer, Rule, Token


@dataclass(frozen=True)
class ScopeBucket:
    """Tokens and rules declared under one scope label."""

    tokens: tuple[Token, ...] = ()
    rules: tuple[Rule, ...] = ()


@dataclass(frozen=True)
class ParsedModel:
    """Addressable model of one CSS snapshot.

    The model is never updated in place: every new snapshot is parsed into
    a fresh ``ParsedModel``. All offsets are relative to ``current_text``.
    """

    original_text: str
    current_text: str
    tokens: tuple[Token, ...] = ()
    rules: tuple[Rule, ...] = ()
    layers: dict[Layer, tuple[Rule, ...]] = field(default_factory=dict)
    scopes: dict[str, ScopeBucket] = field(default_factory=dict)

    def layer(self, layer: Layer | str) -> tuple[Rule, ...]:
        return self.layers.get(Layer(layer), ())

    def tokens_in_layer(self, layer: Layer | str) -> list[Token]:
        wanted = Layer(layer)
        return [t for t in self.tokens if t.layer is wanted]

    def rules_in_scope(self, scope: str) -> list[Rule]:
        return [r for r in self.rules if r.scope == scope]


@dataclass(frozen=True)
class TextDiff:
    """Line-by-line difference between the original and current text."""

    added: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()
    modified: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.removed or self.modified)
