"""Impact, ownership and conformance-level classification of issues."""

from __future__ import annotations

from wcagscope.scanner.models import Impact, Standard, WcagLevel
from wcagscope.wcag.tables import GENERAL_COMPLIANCE, RESPONSIBILITIES

_IMPACTS = {
    "error": Impact.HIGH,
    "warning": Impact.MEDIUM,
    "notice": Impact.LOW,
}


def impact_for_type(issue_type: str) -> Impact:
    """Map an engine issue type to an impact; unknown types are ``Unknown``."""
    return _IMPACTS.get(issue_type, Impact.UNKNOWN)


def responsibility_for_code(code: str) -> str:
    """Pick the owning team by substring match anywhere in *code*.

    The match is not anchored to the principle: ``"2_"`` appearing in a
    technique suffix also counts. Checked in table order.
    """
    for needle, team in RESPONSIBILITIES:
        if needle in code:
            return team
    return GENERAL_COMPLIANCE


def level_for_standard(standard: Standard) -> WcagLevel:
    return WcagLevel(
        A=standard in (Standard.WCAG2A, Standard.WCAG2AA, Standard.WCAG2AAA),
        AA=standard in (Standard.WCAG2AA, Standard.WCAG2AAA),
        AAA=standard is Standard.WCAG2AAA,
    )
