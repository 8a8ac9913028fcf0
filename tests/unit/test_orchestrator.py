"""Tests for the per-standard scan orchestrator."""

from __future__ import annotations

import asyncio

from tests.conftest import FakeCapturer, FakeEngine
from wcagscope.scanner.models import STANDARDS, Standard
from wcagscope.scanner.orchestrator import ScanOrchestrator
from wcagscope.scanner.pa11y import Pa11yEngine, ScanEngineError
from wcagscope.scanner.screenshot import ScreenshotCapturer


def run_async(coro):
    """Helper to run async functions in sync tests."""
    return asyncio.run(coro)


class TestRun:
    def test_one_result_per_standard_in_order(self, fake_engine):
        orchestrator = ScanOrchestrator(fake_engine)
        results = run_async(orchestrator.run("https://example.com"))

        assert [r.standard for r in results] == list(STANDARDS)
        assert all(r.ok for r in results)
        assert sorted(s.value for _, s in fake_engine.calls) == [
            "WCAG2A",
            "WCAG2AA",
            "WCAG2AAA",
        ]

    def test_failure_is_isolated(self, raw_issues):
        engine = FakeEngine(
            raw_issues,
            failures={Standard.WCAG2AA: ScanEngineError("net::ERR_NAME_NOT_RESOLVED")},
        )
        results = run_async(ScanOrchestrator(engine).run("https://example.com"))

        assert len(results) == 3
        assert results[1].to_dict() == {
            "standard": "WCAG2AA",
            "error": "net::ERR_NAME_NOT_RESOLVED",
        }
        assert results[0].ok and results[2].ok
        assert "grouped" in results[0].to_dict()

    def test_unexpected_exception_becomes_error(self, raw_issues):
        engine = FakeEngine(raw_issues, failures={Standard.WCAG2A: ValueError()})
        results = run_async(ScanOrchestrator(engine).run("https://example.com"))
        assert results[0].error == "ValueError"

    def test_scans_run_concurrently(self):
        started: list[Standard] = []
        gate = asyncio.Event()

        class SlowEngine:
            async def run(self, url, standard):
                started.append(standard)
                if len(started) == len(STANDARDS):
                    gate.set()
                await asyncio.wait_for(gate.wait(), timeout=1)
                return []

        results = run_async(ScanOrchestrator(SlowEngine()).run("https://example.com"))
        assert all(r.ok for r in results)
        assert len(started) == 3

    def test_no_caching_between_calls(self, fake_engine):
        orchestrator = ScanOrchestrator(fake_engine)
        run_async(orchestrator.run("https://example.com"))
        run_async(orchestrator.run("https://example.com"))
        assert len(fake_engine.calls) == 6


class TestScreenshotModes:
    def test_summary_has_no_screenshots(self, fake_engine):
        capturer = FakeCapturer()
        orchestrator = ScanOrchestrator(fake_engine, lambda: capturer)
        results = run_async(orchestrator.run("https://example.com", screenshots=False))

        assert capturer.calls == []
        for result in results:
            for bucket in result.to_dict()["grouped"].values():
                for issues in bucket.values():
                    assert all("screenshot" not in i for i in issues)

    def test_full_has_screenshots(self, fake_engine, raw_issues):
        capturer = FakeCapturer()
        orchestrator = ScanOrchestrator(fake_engine, lambda: capturer)
        results = run_async(orchestrator.run("https://example.com", screenshots=True))

        assert len(capturer.calls) == len(raw_issues) * 3
        for result in results:
            for bucket in result.to_dict()["grouped"].values():
                for issues in bucket.values():
                    assert all(i["screenshot"].startswith("data:image/png") for i in issues)


class TestFromConfig:
    def test_wires_engine_and_capturer(self, config):
        config.pa11y_command = "/opt/bin/pa11y"
        config.scan_timeout = 90
        orchestrator = ScanOrchestrator.from_config(config)

        engine = orchestrator._engine
        assert isinstance(engine, Pa11yEngine)
        assert engine.command == "/opt/bin/pa11y"
        assert engine.timeout == 90
        assert engine.browser_args == config.browser_args

        capturer = orchestrator._capturer_factory()
        assert isinstance(capturer, ScreenshotCapturer)
        assert capturer.navigation_timeout == 60.0
        assert capturer.visibility_timeout == 5.0
