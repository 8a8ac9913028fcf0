"""Element screenshots via a headless Chromium driven by Playwright."""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass, field

from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

logger = logging.getLogger(__name__)

_SCROLL_TO_CENTER = "el => el.scrollIntoView({block: 'center', inline: 'center'})"


@dataclass
class ScreenshotCapturer:
    """Captures a single element as a PNG data URI.

    Each call launches and closes its own browser, so calls never share
    state. ``capture`` never raises: every failure yields ``None``.
    """

    navigation_timeout: float = 60.0
    visibility_timeout: float = 5.0
    browser_args: list[str] = field(default_factory=list)

    async def capture(self, url: str, selector: str) -> str | None:
        if not selector:
            return None

        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=True, args=self.browser_args)
                try:
                    return await self._capture_element(browser, url, selector)
                finally:
                    await browser.close()
        except Exception as e:
            logger.error("Screenshot failed for %r on %s: %s", selector, url, e)
            return None

    async def _capture_element(self, browser, url: str, selector: str) -> str | None:
        page = await browser.new_page()
        await page.goto(
            url,
            wait_until="networkidle",
            timeout=self.navigation_timeout * 1000,
        )

        element = await page.query_selector(selector)
        if element is None:
            logger.info("Element not found for screenshot: %s", selector)
            return None

        await element.evaluate(_SCROLL_TO_CENTER)
        try:
            await element.wait_for_element_state(
                "visible", timeout=self.visibility_timeout * 1000
            )
        except PlaywrightTimeoutError:
            logger.info("Element not visible for screenshot: %s", selector)
            return None

        png = await element.screenshot(type="png")
        return "data:image/png;base64," + base64.b64encode(png).decode("ascii")
