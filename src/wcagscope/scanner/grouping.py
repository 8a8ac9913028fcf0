"""Fold a flat raw issue list into a report grouped by WCAG principle."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from wcagscope.scanner.models import (
    EnrichedIssue,
    GroupedReport,
    IssueType,
    PrincipleBucket,
    RawIssue,
    Standard,
)
from wcagscope.wcag.classify import (
    impact_for_type,
    level_for_standard,
    responsibility_for_code,
)
from wcagscope.wcag.codes import parse_code
from wcagscope.wcag.tables import HELP_URL_TEMPLATE

logger = logging.getLogger(__name__)


class Capturer(Protocol):
    async def capture(self, url: str, selector: str) -> str | None: ...


def count_occurrences(issues: Sequence[RawIssue], code: str) -> int:
    return sum(1 for i in issues if i.code == code)


async def group_issues(
    issues: Sequence[RawIssue],
    standard: Standard,
    url: str,
    capturer: Capturer | None = None,
) -> GroupedReport:
    """Group *issues* by principle and type, enriching each one.

    With a *capturer*, a screenshot is taken for every issue, one at a time
    in list order. Issues of an unknown type are logged and dropped.
    """
    grouped: GroupedReport = {}
    level = level_for_standard(standard)

    for raw in issues:
        info = parse_code(raw.code)
        bucket = grouped.setdefault(info.principle, PrincipleBucket())

        try:
            issue_type = IssueType(raw.type)
        except ValueError:
            logger.warning(
                "Unknown issue type %r for %s - skipping", raw.type, raw.code
            )
            continue

        extra = {}
        if capturer is not None:
            extra["screenshot"] = await capturer.capture(url, raw.selector)

        bucket.add(
            issue_type,
            EnrichedIssue(
                title=info.title,
                title_key=info.title_key,
                message=raw.message,
                code=raw.code,
                level=level,
                context=raw.context,
                selector=raw.selector,
                help_url=raw.help_url or HELP_URL_TEMPLATE.format(code=raw.code),
                impact=impact_for_type(raw.type),
                responsibility=responsibility_for_code(raw.code),
                occurrences=count_occurrences(issues, raw.code),
                **extra,
            ),
        )

    return grouped
