"""Scanner data models — raw issues, enriched issues and per-standard results."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class Standard(enum.Enum):
    """WCAG conformance standard requested from the scan engine."""

    WCAG2A = "WCAG2A"
    WCAG2AA = "WCAG2AA"
    WCAG2AAA = "WCAG2AAA"


# Fixed order in which every request scans and reports
STANDARDS: tuple[Standard, ...] = (
    Standard.WCAG2A,
    Standard.WCAG2AA,
    Standard.WCAG2AAA,
)


class IssueType(enum.Enum):
    """Issue type as reported by the scan engine."""

    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"

    @property
    def bucket(self) -> str:
        return f"{self.value}s"


class Impact(enum.Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class RawIssue:
    """A single issue exactly as the scan engine returned it."""

    code: str
    type: str
    message: str = ""
    context: str = ""
    selector: str = ""
    help_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RawIssue:
        """Build from engine JSON, defaulting missing or null string fields."""
        return cls(
            code=str(data.get("code") or ""),
            type=str(data.get("type") or ""),
            message=str(data.get("message") or ""),
            context=str(data.get("context") or ""),
            selector=str(data.get("selector") or ""),
            help_url=data.get("helpUrl") or None,
        )


@dataclass(frozen=True)
class WcagLevel:
    A: bool
    AA: bool
    AAA: bool

    def to_dict(self) -> dict[str, bool]:
        return {"A": self.A, "AA": self.AA, "AAA": self.AAA}


# Distinguishes "screenshots not requested" from a failed capture (None)
_NO_SCREENSHOT: Any = object()


@dataclass(frozen=True)
class EnrichedIssue:
    """A raw issue plus title, level, impact, ownership and occurrence count."""

    title: str
    title_key: str
    message: str
    code: str
    level: WcagLevel
    context: str
    selector: str
    help_url: str
    impact: Impact
    responsibility: str
    occurrences: int
    screenshot: str | None = _NO_SCREENSHOT

    @property
    def has_screenshot_field(self) -> bool:
        return self.screenshot is not _NO_SCREENSHOT

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "title": self.title,
            "titleKey": self.title_key,
            "message": self.message,
            "code": self.code,
            "level": self.level.to_dict(),
            "context": self.context,
            "selector": self.selector,
            "helpUrl": self.help_url,
            "impact": self.impact.value,
            "responsibility": self.responsibility,
            "occurrences": self.occurrences,
        }
        if self.has_screenshot_field:
            data["screenshot"] = self.screenshot
        return data


@dataclass
class PrincipleBucket:
    """Issues for one WCAG principle, split by issue type."""

    errors: list[EnrichedIssue] = field(default_factory=list)
    warnings: list[EnrichedIssue] = field(default_factory=list)
    notices: list[EnrichedIssue] = field(default_factory=list)

    def add(self, issue_type: IssueType, issue: EnrichedIssue) -> None:
        getattr(self, issue_type.bucket).append(issue)

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            "errors": [i.to_dict() for i in self.errors],
            "warnings": [i.to_dict() for i in self.warnings],
            "notices": [i.to_dict() for i in self.notices],
        }


# Principle name -> bucket, in first-seen order
GroupedReport = dict[str, PrincipleBucket]


@dataclass
class StandardResult:
    """Outcome of scanning one URL against one standard."""

    standard: Standard
    grouped: GroupedReport | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"standard": self.standard.value, "error": self.error}
        return {
            "standard": self.standard.value,
            "grouped": {
                principle: bucket.to_dict()
                for principle, bucket in (self.grouped or {}).items()
            },
        }
