from stylepatch.model.change import Change, ChangeKind
from stylepatch.model.parsed import ParsedModel, ScopeBucket, TextDiff
from stylepatch.model.selection import Breadcrumb, PropertyOverride, Selection
from stylepatch.model.token import Layer, Property, Rule, Token

__all__ = [
    "Breadcrumb",
    "Change",
    "ChangeKind",
    "Layer",
    "ParsedModel",
    "Property",
    "PropertyOverride",
    "Rule",
    "ScopeBucket",
    "Selection",
    "TextDiff",
    "Token",
]
