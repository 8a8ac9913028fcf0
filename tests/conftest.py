"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from wcagscope.config import WcagScopeConfig
from wcagscope.scanner.models import RawIssue, Standard

CONTRAST_CODE = "WCAG2AA.Principle1.Guideline1_4.1_4_3.G18.Fail"
TITLE_CODE = "WCAG2AA.Principle2.Guideline2_4.2_4_2.H25.1.NoTitleEl"
LANG_CODE = "WCAG2AA.Principle3.Guideline3_1.3_1_1.H57.2"


class FakeEngine:
    """Scan engine double returning canned issues per standard."""

    def __init__(
        self,
        issues: list[RawIssue] | None = None,
        failures: dict[Standard, Exception] | None = None,
    ) -> None:
        self.issues = issues or []
        self.failures = failures or {}
        self.calls: list[tuple[str, Standard]] = []

    async def run(self, url: str, standard: Standard) -> list[RawIssue]:
        self.calls.append((url, standard))
        if standard in self.failures:
            raise self.failures[standard]
        return list(self.issues)


class FakeCapturer:
    """Screenshot capturer double; returns None for selectors in ``missing``."""

    def __init__(self, missing: set[str] | None = None) -> None:
        self.missing = missing or set()
        self.calls: list[tuple[str, str]] = []

    async def capture(self, url: str, selector: str) -> str | None:
        self.calls.append((url, selector))
        if not selector or selector in self.missing:
            return None
        return f"data:image/png;base64,{selector}"


@pytest.fixture
def raw_issues() -> list[RawIssue]:
    return [
        RawIssue(
            code=CONTRAST_CODE,
            type="error",
            message="Insufficient contrast",
            context="<p>Grey</p>",
            selector="#main > p",
        ),
        RawIssue(
            code=CONTRAST_CODE,
            type="error",
            message="Insufficient contrast",
            context="<span>Grey</span>",
            selector="#main > span",
        ),
        RawIssue(
            code=TITLE_CODE,
            type="warning",
            message="Missing title",
            context="<head></head>",
            selector="html > head",
            help_url="https://example.org/help",
        ),
        RawIssue(
            code=LANG_CODE,
            type="notice",
            message="Check language",
            context="<html>",
            selector="html",
        ),
    ]


@pytest.fixture
def fake_engine(raw_issues: list[RawIssue]) -> FakeEngine:
    return FakeEngine(raw_issues)


@pytest.fixture
def config(tmp_path: Path) -> WcagScopeConfig:
    return WcagScopeConfig(
        config_dir=tmp_path / "config",
        static_dir=tmp_path / "public",
    )
