"""Tests for rule matching, specificity, and override resolution."""

import pytest

from stylepatch.cascade import (
    breadcrumb,
    create_selection,
    match_rules,
    property_override,
    rules_for_property,
    selector_matches,
    specificity,
    top_rule,
)
from stylepatch.parser import parse_css

BUTTONS = ".btn { color: red; }\n.btn.primary { color: blue; }\n"


# ---------------------------------------------------------------------------
# Specificity
# ---------------------------------------------------------------------------


class TestSpecificity:
    @pytest.mark.parametrize(
        "selector, expected",
        [
            (".btn", 13),
            (".btn.primary", 30),
            ("#main", 104),
            ("a:hover", 16),
            ("[type=text]", 18),
            ("div", 3),
            ("*", 0),
        ],
    )
    def test_scores(self, selector, expected):
        assert specificity(selector) == expected

    def test_letters_overweight_long_names(self):
        assert specificity(".a.b") < specificity(".navigation-menu")


# ---------------------------------------------------------------------------
# Selector matching
# ---------------------------------------------------------------------------


class TestSelectorMatches:
    @pytest.mark.parametrize(
        "selector",
        [".card", ".dark .card", "div > .card", ".card:hover", ".link, .card", ".card.active"],
    )
    def test_matches(self, selector):
        assert selector_matches(selector, ["card"])

    @pytest.mark.parametrize("selector", [".card-footer", ".cards", "#card", "card", ".dark .card_body"])
    def test_rejects(self, selector):
        assert not selector_matches(selector, ["card"])

    def test_any_class_matches(self):
        assert selector_matches(".btn", ["card", "btn"])

    def test_empty_class_list(self):
        assert not selector_matches(".btn", [])


# ---------------------------------------------------------------------------
# Cascade ordering
# ---------------------------------------------------------------------------


class TestMatchRules:
    def test_compound_selector_ranks_higher(self):
        model = parse_css(BUTTONS)
        rules = match_rules(model, ["btn"])
        assert [r.selector for r in rules] == [".btn", ".btn.primary"]

    def test_order_is_by_specificity_not_source(self):
        model = parse_css(".btn.primary { color: blue; }\n.btn { color: red; }\n")
        assert [r.selector for r in match_rules(model, ["btn"])] == [".btn", ".btn.primary"]

    def test_ties_keep_source_order(self):
        model = parse_css(".btn { color: red; }\n.btn { color: green; }\n")
        rules = match_rules(model, ["btn"])
        assert [r.properties[0].value for r in rules] == ["red", "green"]

    def test_unrelated_rules_excluded(self):
        model = parse_css(".card { padding: 0; }\n.card-footer { margin: 0; }\n")
        assert [r.selector for r in match_rules(model, ["card"])] == [".card"]

    def test_no_match(self):
        assert match_rules(parse_css(BUTTONS), ["nope"]) == []


# ---------------------------------------------------------------------------
# Property override resolution
# ---------------------------------------------------------------------------


class TestPropertyOverride:
    def test_top_rule_is_highest_precedence(self):
        rules = match_rules(parse_css(BUTTONS), ["btn"])
        winner = top_rule(rules, "color")
        assert winner is not None
        assert winner.selector == ".btn.primary"

    def test_top_rule_case_insensitive(self):
        rules = match_rules(parse_css(BUTTONS), ["btn"])
        assert top_rule(rules, "COLOR").selector == ".btn.primary"

    def test_top_rule_missing_property(self):
        rules = match_rules(parse_css(BUTTONS), ["btn"])
        assert top_rule(rules, "margin") is None

    def test_override_report(self):
        rules = match_rules(parse_css(BUTTONS), ["btn"])
        report = property_override(rules, "color")
        assert report.top_rule.selector == ".btn.primary"
        assert report.is_overridden is True
        assert [r.selector for r in report.overriding_rules] == [".btn"]

    def test_not_overridden_with_single_declaration(self):
        model = parse_css(".btn { color: red; }\n.btn.primary { margin: 0; }\n")
        report = property_override(match_rules(model, ["btn"]), "color")
        assert report.top_rule.selector == ".btn"
        assert report.is_overridden is False
        assert report.overriding_rules == ()

    def test_rules_for_property(self):
        model = parse_css(".btn { color: red; }\n.btn.primary { margin: 0; }\n")
        rules = match_rules(model, ["btn"])
        assert [r.selector for r in rules_for_property(rules, "margin")] == [".btn.primary"]


# ---------------------------------------------------------------------------
# Selections and breadcrumbs
# ---------------------------------------------------------------------------


class TestSelection:
    def test_create_selection(self):
        selection = create_selection(parse_css(BUTTONS), ["btn", "primary"])
        assert selection is not None
        assert selection.classes == ("btn", "primary")
        assert selection.primary_class == "btn"
        assert [r.selector for r in selection.matched_rules] == [".btn", ".btn.primary"]

    def test_duplicates_removed(self):
        selection = create_selection(parse_css(BUTTONS), ["btn", "btn"])
        assert selection.classes == ("btn",)

    def test_no_classes(self):
        assert create_selection(parse_css(BUTTONS), []) is None

    def test_breadcrumb(self):
        model = parse_css("@layer components;\n.btn {\n  color: red;\n}\n")
        crumb = breadcrumb(model.rules[0])
        assert (crumb.layer, crumb.scope, crumb.selector) == ("components", ":root", ".btn")
        assert str(crumb) == "components > :root > .btn"
