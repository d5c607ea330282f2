from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StylepatchConfig:
    root_scope: str = ":root"
    dark_scope: str = ".dark"
    media_scope: str = "@media"
    # Blocks with these selectors hold design tokens rather than styling.
    scope_selectors: tuple[str, ...] = (
        ":root",
        ".dark",
        "html",
        ":host",
        ":root.dark",
        "html.dark",
    )
    log_level: str = "WARNING"
