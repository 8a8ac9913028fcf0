"""Scan orchestrator — runs every standard concurrently for one URL."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

from wcagscope.config import WcagScopeConfig
from wcagscope.scanner.grouping import Capturer, group_issues
from wcagscope.scanner.models import STANDARDS, RawIssue, Standard, StandardResult
from wcagscope.scanner.pa11y import Pa11yEngine
from wcagscope.scanner.screenshot import ScreenshotCapturer

logger = logging.getLogger(__name__)


class Engine(Protocol):
    async def run(self, url: str, standard: Standard) -> list[RawIssue]: ...


class ScanOrchestrator:
    """Scans a URL once per standard and packages the grouped reports.

    Standards are independent: a failing scan becomes an error entry for that
    standard only. Nothing is cached between calls.
    """

    def __init__(
        self,
        engine: Engine,
        capturer_factory: Callable[[], Capturer] | None = None,
        standards: tuple[Standard, ...] = STANDARDS,
    ) -> None:
        self._engine = engine
        self._capturer_factory = capturer_factory
        self._standards = standards

    @classmethod
    def from_config(cls, config: WcagScopeConfig) -> ScanOrchestrator:
        engine = Pa11yEngine(
            command=config.pa11y_command,
            timeout=config.scan_timeout,
            browser_args=list(config.browser_args),
        )

        def capturer_factory() -> ScreenshotCapturer:
            return ScreenshotCapturer(
                navigation_timeout=config.navigation_timeout,
                visibility_timeout=config.visibility_timeout,
                browser_args=list(config.browser_args),
            )

        return cls(engine, capturer_factory)

    async def run(self, url: str, screenshots: bool = False) -> list[StandardResult]:
        """Scan *url* against every standard; results keep standard order."""
        outcomes = await asyncio.gather(
            *(self.run_standard(url, s, screenshots) for s in self._standards),
            return_exceptions=True,
        )

        results: list[StandardResult] = []
        for standard, outcome in zip(self._standards, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.error("Scan failed (%s): %s", standard.value, outcome)
                message = str(outcome) or type(outcome).__name__
                results.append(StandardResult(standard=standard, error=message))
            else:
                results.append(outcome)
        return results

    async def run_standard(
        self, url: str, standard: Standard, screenshots: bool = False
    ) -> StandardResult:
        issues = await self._engine.run(url, standard)
        logger.info("%d raw issue(s) for %s (%s)", len(issues), url, standard.value)

        capturer = None
        if screenshots and self._capturer_factory is not None:
            capturer = self._capturer_factory()

        grouped = await group_issues(issues, standard, url, capturer)
        return StandardResult(standard=standard, grouped=grouped)
