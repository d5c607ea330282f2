"""stylepatch: structural CSS model and positional patch engine."""

from stylepatch.cascade import match_rules, property_override, top_rule
from stylepatch.config import StylepatchConfig
from stylepatch.document import Document
from stylepatch.model import (
    Change,
    ChangeKind,
    Layer,
    ParsedModel,
    Property,
    Rule,
    Selection,
    Token,
)
from stylepatch.parser import parse_css
from stylepatch.patch import PatchEngine, PatchError, StaleModelError
from stylepatch.session import EditorSession

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Change",
    "ChangeKind",
    "Document",
    "EditorSession",
    "Layer",
    "ParsedModel",
    "PatchEngine",
    "PatchError",
    "Property",
    "Rule",
    "Selection",
    "StaleModelError",
    "StylepatchConfig",
    "Token",
    "match_rules",
    "parse_css",
    "property_override",
    "top_rule",
]
