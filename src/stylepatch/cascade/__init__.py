"""Cascade resolver: which rules apply to an element, and which one wins."""

from stylepatch.cascade.resolver import (
    breadcrumb,
    create_selection,
    match_rules,
    property_override,
    rules_for_property,
    selector_matches,
    top_rule,
)
from stylepatch.cascade.specificity import specificity

__all__ = [
    "breadcrumb",
    "create_selection",
    "match_rules",
    "property_override",
    "rules_for_property",
    "selector_matches",
    "specificity",
    "top_rule",
]
