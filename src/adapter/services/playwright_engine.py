"""Playwright Rendering Engine Implementation

Prints HTML to PDF with a headless Chromium driven by Playwright.
Each instance owns one browser process for one render.
"""

import logging
from typing import Optional

from playwright.async_api import Browser, Playwright, async_playwright

from src.app.services.rendering_engine import RenderingEngine

logger = logging.getLogger(__name__)

PAGE_FORMAT = "A4"
PAGE_MARGIN = {
    "top": "20px",
    "right": "20px",
    "bottom": "20px",
    "left": "20px",
}
BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


class PlaywrightRenderingEngine(RenderingEngine):
    """
    Headless Chromium implementation of RenderingEngine

    The page is captured only after the network has been idle, so fonts and
    images referenced by the markup are in place.
    """

    def __init__(self, navigation_timeout_ms: Optional[float] = None):
        self.navigation_timeout_ms = navigation_timeout_ms
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    async def start(self) -> None:
        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(
            headless=True,
            args=BROWSER_ARGS,
        )
        logger.debug("Chromium launched")

    async def render(self, markup: str) -> bytes:
        if self._browser is None:
            raise RuntimeError("Rendering engine has not been started")

        page = await self._browser.new_page()
        if self.navigation_timeout_ms is not None:
            page.set_default_timeout(self.navigation_timeout_ms)
        await page.set_content(markup, wait_until="networkidle")
        return await page.pdf(
            format=PAGE_FORMAT,
            print_background=True,
            margin=PAGE_MARGIN,
        )

    async def close(self) -> None:
        try:
            if self._browser is not None:
                await self._browser.close()
        finally:
            self._browser = None
            if self._playwright is not None:
                await self._playwright.stop()
                self._playwright = None
            logger.debug("Chromium released")
