"""Approximate selector specificity.

Scores are used only to order matched rules. The weights are:
    100 per ``#``
    10 per ``.``, ``[``, or ``:``
    1 per ASCII letter anywhere in the selector

The letter term makes long names weigh more than they would under real
CSS specificity. Rule ordering depends on this exact formula.
"""

from __future__ import annotations

import re

_LETTER_RE = re.compile(r"[A-Za-z]")


def specificity(selector: str) -> int:
    score = 100 * selector.count("#")
    score += 10 * (selector.count(".") + selector.count("[") + selector.count(":"))
    score += len(_LETTER_RE.findall(selector))
    return score
