"""REST API for accessibility audits."""

from __future__ import annotations

import logging
import re

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["audits"])

_URL_RE = re.compile(r"^https?://")

INVALID_URL = {"error": "A valid URL is required"}


class ScanQuery(BaseModel):
    url: str

    @field_validator("url")
    @classmethod
    def _http_url(cls, value: str) -> str:
        if not value or not _URL_RE.match(value):
            raise ValueError("url must start with http:// or https://")
        return value


async def _audit(request: Request, url: str | None, screenshots: bool):
    try:
        query = ScanQuery(url=url)
    except ValidationError:
        return JSONResponse(status_code=400, content=INVALID_URL)

    mode = "full" if screenshots else "summary"
    logger.info("Testing URL (%s): %s", mode, query.url)

    orchestrator = request.app.state.orchestrator
    results = await orchestrator.run(query.url, screenshots=screenshots)
    return [r.to_dict() for r in results]


@router.get("/test/summary")
async def test_summary(request: Request, url: str | None = None):
    """Scan without screenshots."""
    return await _audit(request, url, screenshots=False)


@router.get("/test/full")
async def test_full(request: Request, url: str | None = None):
    """Scan and attach a screenshot to every issue."""
    return await _audit(request, url, screenshots=True)
