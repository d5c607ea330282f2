"""Textual rule matching and per-property override resolution.

Matching is not a selector engine: a rule applies to an element when a
``.class`` for one of the element's classes shows up in the selector.
Combinators are only used to split the selector, never evaluated.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from stylepatch.cascade.specificity import specificity
from stylepatch.model import Breadcrumb, ParsedModel, PropertyOverride, Rule, Selection

__all__ = [
    "breadcrumb",
    "create_selection",
    "match_rules",
    "property_override",
    "rules_for_property",
    "selector_matches",
    "top_rule",
]

_COMBINATOR_RE = re.compile(r"[\s,>/+~]")

# Characters that continue a class name; a ``.card`` followed by one of
# these is part of a longer identifier such as ``.card-footer``.
_IDENT_CHAR_RE = re.compile(r"[\w-]")


def _mentions_class(selector: str, class_name: str) -> bool:
    """Substring check for ``.class_name`` not followed by identifier chars."""
    needle = "." + class_name
    start = selector.find(needle)
    while start != -1:
        end = start + len(needle)
        if end == len(selector) or not _IDENT_CHAR_RE.match(selector[end]):
            return True
        start = selector.find(needle, start + 1)
    return False


def selector_matches(selector: str, classes: Iterable[str]) -> bool:
    """Return True if *selector* references any of *classes*.

    A selector part equal to ``.cls`` matches, as does a whole-class
    occurrence of ``.cls`` inside a compound part (``.btn.primary``,
    ``.card:hover``). A partial identifier such as ``.card-footer`` does not
    match the class ``card``.
    """
    classes = list(classes)
    parts = [p.strip() for p in _COMBINATOR_RE.split(selector)]
    for class_name in classes:
        if ("." + class_name) in parts:
            return True
    return any(_mentions_class(selector, c) for c in classes)


def match_rules(model: ParsedModel, classes: Sequence[str]) -> list[Rule]:
    """Return rules matching *classes* in ascending cascade order.

    Ties keep source order (``sorted`` is stable).
    """
    matched = [r for r in model.rules if selector_matches(r.selector, classes)]
    return sorted(matched, key=lambda r: specificity(r.selector))


def rules_for_property(rules: Sequence[Rule], property_name: str) -> list[Rule]:
    return [r for r in rules if r.declares(property_name)]


def top_rule(rules: Sequence[Rule], property_name: str) -> Rule | None:
    """Return the highest-precedence rule in *rules* declaring the property."""
    for rule in reversed(rules):
        if rule.declares(property_name):
            return rule
    return None


def property_override(rules: Sequence[Rule], property_name: str) -> PropertyOverride:
    declaring = rules_for_property(rules, property_name)
    winner = top_rule(rules, property_name)
    return PropertyOverride(
        top_rule=winner,
        is_overridden=len(declaring) > 1,
        overriding_rules=tuple(r for r in declaring if r is not winner),
    )


def breadcrumb(rule: Rule) -> Breadcrumb:
    return Breadcrumb(layer=rule.layer.value, scope=rule.scope, selector=rule.selector)


def create_selection(model: ParsedModel, classes: Iterable[str]) -> Selection | None:
    """Resolve an inspected element's classes into a Selection.

    Returns None when the element has no classes.
    """
    unique = tuple(dict.fromkeys(c for c in classes if c))
    if not unique:
        return None
    return Selection(classes=unique, matched_rules=tuple(match_rules(model, unique)))
