"""Unit tests for PlaywrightRenderingEngine (Playwright is mocked)"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from src.adapter.services.playwright_engine import (
    BROWSER_ARGS,
    PAGE_FORMAT,
    PAGE_MARGIN,
    PlaywrightRenderingEngine,
)


@pytest.fixture
def playwright_mocks():
    """async_playwright() -> playwright -> chromium -> browser -> page"""
    page = MagicMock()
    page.set_content = AsyncMock()
    page.pdf = AsyncMock(return_value=b"%PDF-1.4 rendered")

    browser = MagicMock()
    browser.new_page = AsyncMock(return_value=page)
    browser.close = AsyncMock()

    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)
    playwright.stop = AsyncMock()

    manager = MagicMock()
    manager.start = AsyncMock(return_value=playwright)

    with patch(
        "src.adapter.services.playwright_engine.async_playwright",
        return_value=manager,
    ):
        yield {"playwright": playwright, "browser": browser, "page": page}


class TestPlaywrightRenderingEngine:
    @pytest.mark.asyncio
    async def test_render_prints_a4_with_backgrounds(self, playwright_mocks):
        # Arrange
        engine = PlaywrightRenderingEngine()

        # Act
        await engine.start()
        pdf_bytes = await engine.render("<html></html>")
        await engine.close()

        # Assert
        assert pdf_bytes == b"%PDF-1.4 rendered"
        playwright_mocks["playwright"].chromium.launch.assert_awaited_once_with(
            headless=True, args=BROWSER_ARGS
        )
        playwright_mocks["page"].set_content.assert_awaited_once_with(
            "<html></html>", wait_until="networkidle"
        )
        playwright_mocks["page"].pdf.assert_awaited_once_with(
            format=PAGE_FORMAT, print_background=True, margin=PAGE_MARGIN
        )
        playwright_mocks["browser"].close.assert_awaited_once()
        playwright_mocks["playwright"].stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_after_failed_launch_stops_driver(self, playwright_mocks):
        playwright_mocks["playwright"].chromium.launch.side_effect = RuntimeError("launch failed")
        engine = PlaywrightRenderingEngine()

        with pytest.raises(RuntimeError):
            await engine.start()
        await engine.close()

        playwright_mocks["browser"].close.assert_not_awaited()
        playwright_mocks["playwright"].stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self, playwright_mocks):
        engine = PlaywrightRenderingEngine()
        await engine.start()

        await engine.close()
        await engine.close()

        playwright_mocks["browser"].close.assert_awaited_once()
        playwright_mocks["playwright"].stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_render_before_start_fails(self):
        engine = PlaywrightRenderingEngine()

        with pytest.raises(RuntimeError):
            await engine.render("<html></html>")

    @pytest.mark.asyncio
    async def test_navigation_timeout_applied_to_page(self, playwright_mocks):
        engine = PlaywrightRenderingEngine(navigation_timeout_ms=5000)
        await engine.start()

        await engine.render("<html></html>")
        await engine.close()

        playwright_mocks["page"].set_default_timeout.assert_called_once_with(5000)
