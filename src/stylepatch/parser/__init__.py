from stylepatch.parser.parser import parse_css, strip_comments
from stylepatch.parser.queries import find_rules, find_tokens, get_rule, get_token

__all__ = [
    "find_rules",
    "find_tokens",
    "get_rule",
    "get_token",
    "parse_css",
    "strip_comments",
]
