"""Best-effort extraction of WCAG principle and criterion from issue codes.

Engine codes look like ``WCAG2AA.Principle1.Guideline1_4.1_4_3.G18.Fail``.
Nothing is range-checked: anything unrecognised falls back to defaults.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from wcagscope.wcag.tables import (
    BEST_PRACTICES,
    DEFAULT_TITLE,
    PRINCIPLES,
    TITLES,
    UNKNOWN_KEY,
)

_CRITERION_RE = re.compile(r"(\d+)_\d+\.(\d+)_(\d+)_(\d+)")
_PRINCIPLE_RE = re.compile(r"Principle(\d)")


@dataclass(frozen=True)
class CodeInfo:
    principle: str
    title_key: str
    title: str


def title_key(code: str) -> str:
    """Return the ``N_K_J`` lookup key for *code*, or ``"Unknown"``."""
    m = _CRITERION_RE.search(code or "")
    if not m:
        return UNKNOWN_KEY
    return f"{m.group(1)}_{m.group(3)}_{m.group(4)}"


def title(code: str) -> str:
    return TITLES.get(title_key(code), DEFAULT_TITLE)


def principle(code: str) -> str:
    m = _PRINCIPLE_RE.search(code or "")
    if not m:
        return BEST_PRACTICES
    return PRINCIPLES.get(int(m.group(1)), BEST_PRACTICES)


def parse_code(code: str) -> CodeInfo:
    key = title_key(code)
    return CodeInfo(
        principle=principle(code),
        title_key=key,
        title=TITLES.get(key, DEFAULT_TITLE),
    )
