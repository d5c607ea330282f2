"""Inspector results: selections, breadcrumbs, and override reports."""

from __future__ import annotations

from dataclasses import dataclass

from stylepatch.model.token import Rule


@dataclass(frozen=True)
class Selection:
    """Rules matching one inspected element, in ascending cascade order."""

    classes: tuple[str, ...]
    matched_rules: tuple[Rule, ...] = ()

    @property
    def primary_class(self) -> str | None:
        return self.classes[0] if self.classes else None


@dataclass(frozen=True)
class Breadcrumb:
    layer: str
    scope: str
    selector: str

    def __str__(self) -> str:
        return f"{self.layer} > {self.scope} > {self.selector}"


@dataclass(frozen=True)
class PropertyOverride:
    """Which rule wins for a property and which declarations it overrides."""

    top_rule: Rule | None
    is_overridden: bool
    overriding_rules: tuple[Rule, ...] = ()
