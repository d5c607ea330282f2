"""Regular expressions shared by the parser and the patch engine.

Both sides must agree on where a value starts and ends, otherwise offsets
recorded at parse time would not line up with the spans patched later.
"""

from __future__ import annotations

import re

# A declaration value: no braces or semicolons, no surrounding whitespace.
VALUE = r"[^;{}\s](?:[^;{}]*[^;{}\s])?"

_VALUE_END = r"(?=\s*(?:;|\}|$))"

COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

LAYER_RE = re.compile(r"@layer\s+(theme|base|components|utilities)")

# Custom property outside a rule body: ``--name: value;``
TOKEN_RE = re.compile(
    r"""
    (?<![\w-])
    (?P<name>--[A-Za-z0-9_-]+)      # custom property name
    \s*:\s*
    (?P<value>""" + VALUE + r""")   # trimmed value
    \s*;
    """,
    re.VERBOSE,
)

# Any declaration inside a rule body, one or more per line.
DECL_RE = re.compile(
    r"""
    (?:^|[;{])\s*
    (?P<name>-{0,2}[A-Za-z_][\w-]*)  # property or custom property name
    \s*:\s*
    (?P<value>""" + VALUE + r""")
    """ + _VALUE_END,
    re.VERBOSE,
)


def declaration_re(name: str) -> re.Pattern[str]:
    """Build a pattern locating the value of the declaration named *name*."""
    return re.compile(
        r"(?<![\w-])" + re.escape(name) + r"\s*:\s*(?P<value>" + VALUE + r")" + _VALUE_END,
        re.IGNORECASE,
    )
