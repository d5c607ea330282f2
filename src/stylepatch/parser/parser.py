"""Line-oriented structural parser for design-system CSS.

The scan is a single forward pass over the comment-masked text. Four pieces
of state carry across lines: the current ``@layer``, the current scope
label, whether a rule body is open, and the rule being built. Nothing is
re-classified after the scan, so a rule's layer and scope are whatever was
current when its block opened.

Example:
    @layer theme;
    :root { --gap: 4px; }
    .card {
      padding: var(--gap);
    }
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from stylepatch.config import StylepatchConfig
from stylepatch.model import Layer, ParsedModel, Property, Rule, ScopeBucket, Token
from stylepatch.parser.patterns import COMMENT_RE, DECL_RE, LAYER_RE, TOKEN_RE

__all__ = ["parse_css", "strip_comments"]

log = logging.getLogger(__name__)


def strip_comments(css: str) -> str:
    """Blank out ``/* ... */`` comments, keeping length and line breaks.

    Offsets computed on the result are valid against *css* itself.
    """
    return COMMENT_RE.sub(lambda m: "".join(c if c == "\n" else " " for c in m.group(0)), css)


@dataclass
class _RuleDraft:
    selector: str
    layer: Layer
    scope: str
    start_line: int
    start_char: int
    holds_tokens: bool = False
    properties: list[Property] = field(default_factory=list)


class _Scanner:
    def __init__(self, text: str, config: StylepatchConfig) -> None:
        self.text = text
        self.config = config
        self.layer = Layer.OTHER
        self.scope = config.root_scope
        self.current: _RuleDraft | None = None
        self.tokens: list[Token] = []
        self.rules: list[Rule] = []
        self.scopes: dict[str, tuple[list[Token], list[Rule]]] = {}
        self._ensure_scope(config.root_scope)
        self._ensure_scope(config.dark_scope)

    def scan(self) -> ParsedModel:
        offset = 0
        for line_no, line in enumerate(strip_comments(self.text).split("\n")):
            self._scan_line(line_no, line, offset)
            offset += len(line) + 1

        layers = {
            layer: tuple(r for r in self.rules if r.layer is layer) for layer in Layer
        }
        scopes = {
            name: ScopeBucket(tokens=tuple(tokens), rules=tuple(rules))
            for name, (tokens, rules) in self.scopes.items()
        }
        log.debug("Parsed %d tokens and %d rules", len(self.tokens), len(self.rules))
        return ParsedModel(
            original_text=self.text,
            current_text=self.text,
            tokens=tuple(self.tokens),
            rules=tuple(self.rules),
            layers=layers,
            scopes=scopes,
        )

    # --- line handling --------------------------------------------------------

    def _scan_line(self, line_no: int, line: str, offset: int) -> None:
        if not line.strip():
            return

        layer_match = LAYER_RE.search(line)
        if layer_match:
            self.layer = Layer(layer_match.group(1))
            return

        self._update_scope(line)
        opens = "{" in line
        closes = "}" in line

        if self.current is None:
            self._collect_tokens(line_no, line, offset)
            if opens and closes and line.index("{") < line.rindex("}"):
                self._scan_inline_block(line_no, line, offset)
            elif opens and not closes:
                self._open_rule(line_no, line, offset)
            return

        if ":" in line and not opens:
            self._collect_declarations(line_no, line, offset)
        if closes:
            self._close_rule(line_no, line, offset)

    def _update_scope(self, line: str) -> None:
        head = line.split("}", 1)[0]
        if ":root" in head:
            self.scope = self.config.root_scope
        elif ".dark" in head:
            self.scope = self.config.dark_scope
        elif "@media" in head:
            self.scope = self.config.media_scope

    def _collect_tokens(self, line_no: int, line: str, offset: int) -> None:
        for match in TOKEN_RE.finditer(line):
            value_start = offset + match.start("value")
            self._add_token(match.group("name"), match.group("value"), line_no, value_start)

    def _collect_declarations(
        self,
        line_no: int,
        line: str,
        offset: int,
        start: int = 0,
        end: int | None = None,
        *,
        skip_custom: bool = False,
    ) -> None:
        """Attach declarations found in ``line[start:end]`` to the open rule.

        Custom properties become tokens inside scope blocks. With
        *skip_custom* they are ignored, for lines whose tokens were already
        collected.
        """
        draft = self.current
        if draft is None:
            return
        for match in DECL_RE.finditer(line[start:end]):
            name = match.group("name")
            value = match.group("value")
            value_start = offset + start + match.start("value")
            if name.startswith("--"):
                if skip_custom:
                    continue
                if draft.holds_tokens:
                    self._add_token(name, value, line_no, value_start)
                    continue
            draft.properties.append(
                Property(
                    name=name,
                    value=value,
                    start_line=line_no,
                    end_line=line_no,
                    start_char=value_start,
                    end_char=value_start + len(value),
                )
            )

    # --- rules ----------------------------------------------------------------

    def _open_rule(self, line_no: int, line: str, offset: int) -> None:
        brace = line.index("{")
        selector = line[:brace].strip()
        self.current = _RuleDraft(
            selector=selector,
            layer=self.layer,
            scope=self.scope,
            start_line=line_no,
            start_char=offset,
            holds_tokens=self._is_scope_selector(selector),
        )
        # Custom properties on the opening line were already taken as tokens.
        self._collect_declarations(line_no, line, offset, brace + 1, skip_custom=True)

    def _scan_inline_block(self, line_no: int, line: str, offset: int) -> None:
        """Handle ``selector { ... }`` written on a single line."""
        brace = line.index("{")
        selector = line[:brace].strip()
        self.current = _RuleDraft(
            selector=selector,
            layer=self.layer,
            scope=self.scope,
            start_line=line_no,
            start_char=offset,
        )
        self._collect_declarations(
            line_no, line, offset, brace + 1, line.rindex("}"), skip_custom=True
        )
        if self.current.properties:
            self._close_rule(line_no, line, offset)
        else:
            self.current = None

    def _close_rule(self, line_no: int, line: str, offset: int) -> None:
        draft = self.current
        self.current = None
        if draft is None or not draft.selector:
            return
        rule = Rule(
            selector=draft.selector,
            layer=draft.layer,
            scope=draft.scope,
            properties=tuple(draft.properties),
            start_line=draft.start_line,
            end_line=line_no,
            start_char=draft.start_char,
            end_char=offset + len(line),
        )
        self.rules.append(rule)
        self._ensure_scope(rule.scope)[1].append(rule)

    # --- helpers --------------------------------------------------------------

    def _add_token(self, name: str, value: str, line_no: int, value_start: int) -> None:
        token = Token(
            name=name,
            value=value,
            scope=self.scope,
            layer=self.layer,
            start_line=line_no,
            end_line=line_no,
            start_char=value_start,
            end_char=value_start + len(value),
        )
        self.tokens.append(token)
        self._ensure_scope(token.scope)[0].append(token)

    def _ensure_scope(self, name: str) -> tuple[list[Token], list[Rule]]:
        return self.scopes.setdefault(name, ([], []))

    def _is_scope_selector(self, selector: str) -> bool:
        parts = [p.strip() for p in selector.split(",")]
        return bool(selector) and all(p in self.config.scope_selectors for p in parts)


def _empty_model(css_text: str, config: StylepatchConfig) -> ParsedModel:
    return ParsedModel(
        original_text=css_text,
        current_text=css_text,
        layers={layer: () for layer in Layer},
        scopes={config.root_scope: ScopeBucket()},
    )


def parse_css(css_text: str, config: StylepatchConfig | None = None) -> ParsedModel:
    """Parse CSS text into a ``ParsedModel``.

    Never raises for bad input: if the scan fails for any reason the error
    is logged and a minimal empty model is returned instead.
    """
    config = config or StylepatchConfig()
    try:
        return _Scanner(css_text, config).scan()
    except Exception:
        log.exception("CSS parse failed; returning empty model")
        return _empty_model(css_text, config)
