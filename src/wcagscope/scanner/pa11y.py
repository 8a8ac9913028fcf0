"""Scan engine adapter — runs the pa11y CLI and parses its JSON report."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from dataclasses import dataclass, field

from wcagscope.scanner.models import RawIssue, Standard

logger = logging.getLogger(__name__)

# pa11y exits 2 when the page has issues, which is still a completed scan
_OK_EXIT_CODES = (0, 2)

# Extra wall-clock time allowed on top of pa11y's own timeout
_GRACE_SECONDS = 30.0


class ScanEngineError(RuntimeError):
    """The scan engine could not produce an issue list."""


@dataclass
class Pa11yEngine:
    """Runs one pa11y scan per call as a subprocess.

    The engine is stateless between calls; every call launches its own pa11y
    process (and therefore its own headless browser).
    """

    command: str = "pa11y"
    timeout: float = 180.0
    browser_args: list[str] = field(default_factory=list)

    def build_args(
        self, url: str, standard: Standard, config_path: str | None = None
    ) -> list[str]:
        args = [
            self.command,
            "--reporter",
            "json",
            "--standard",
            standard.value,
            "--include-warnings",
            "--timeout",
            str(int(self.timeout * 1000)),
        ]
        if config_path:
            args += ["--config", config_path]
        args.append(url)
        return args

    async def run(self, url: str, standard: Standard) -> list[RawIssue]:
        """Scan *url* against *standard* and return the raw issues.

        Raises ScanEngineError on any engine failure.
        """
        config_path = self._write_launch_config()
        try:
            stdout, stderr, returncode = await self._execute(
                self.build_args(url, standard, config_path)
            )
        finally:
            if config_path:
                os.unlink(config_path)

        if returncode not in _OK_EXIT_CODES:
            message = (
                stderr.strip()
                or stdout.strip()
                or f"pa11y exited with code {returncode}"
            )
            raise ScanEngineError(message)

        issues = parse_report(stdout)
        logger.debug(
            "pa11y returned %d issue(s) for %s (%s)", len(issues), url, standard.value
        )
        return issues

    async def _execute(self, args: list[str]) -> tuple[str, str, int]:
        try:
            proc = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (FileNotFoundError, PermissionError) as e:
            raise ScanEngineError(f"Cannot run {self.command}: {e}") from e

        try:
            out, err = await asyncio.wait_for(
                proc.communicate(), timeout=self.timeout + _GRACE_SECONDS
            )
        except asyncio.TimeoutError:
            proc.kill()
            await proc.wait()
            raise ScanEngineError(
                f"pa11y did not finish within {self.timeout + _GRACE_SECONDS:.0f}s"
            ) from None

        return (
            out.decode("utf-8", errors="replace"),
            err.decode("utf-8", errors="replace"),
            proc.returncode if proc.returncode is not None else -1,
        )

    def _write_launch_config(self) -> str | None:
        """Write a pa11y config file carrying the Chromium launch flags."""
        if not self.browser_args:
            return None
        fd, path = tempfile.mkstemp(prefix="wcagscope-pa11y-", suffix=".json")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump({"chromeLaunchConfig": {"args": list(self.browser_args)}}, f)
        return path


def parse_report(text: str) -> list[RawIssue]:
    """Parse pa11y's JSON reporter output into raw issues."""
    try:
        data = json.loads(text) if text.strip() else []
    except json.JSONDecodeError as e:
        raise ScanEngineError(f"Unreadable pa11y report: {e}") from e

    # Older reporters wrap the list as {"issues": [...]}
    if isinstance(data, dict):
        data = data.get("issues", [])
    if not isinstance(data, list):
        raise ScanEngineError("pa11y report is not a list of issues")

    return [RawIssue.from_dict(item) for item in data if isinstance(item, dict)]
