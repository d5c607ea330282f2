"""Search helpers over a parsed model."""

from __future__ import annotations

from stylepatch.model import ParsedModel, Rule, Token


def find_tokens(model: ParsedModel, query: str) -> list[Token]:
    """Return tokens whose name, value, or scope contains *query*."""
    return [
        t for t in model.tokens if query in t.name or query in t.value or query in t.scope
    ]


def find_rules(model: ParsedModel, query: str) -> list[Rule]:
    """Return rules whose selector contains *query*."""
    return [r for r in model.rules if query in r.selector]


def get_token(model: ParsedModel, name: str, scope: str | None = None) -> Token | None:
    for token in model.tokens:
        if token.name == name and (scope is None or token.scope == scope):
            return token
    return None


def get_rule(model: ParsedModel, selector: str) -> Rule | None:
    for rule in model.rules:
        if rule.selector == selector:
            return rule
    return None
