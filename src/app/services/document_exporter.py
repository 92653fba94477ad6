"""Document Exporter

Drives a rendering engine to turn rendered markup into PDF bytes, with a
bounded run time and guaranteed engine release.
"""

import asyncio
import logging
import time
from typing import Callable

from src.app.services.rendering_engine import RenderingEngine
from src.domain.errors import DocumentExportError

logger = logging.getLogger(__name__)

DEFAULT_RENDER_TIMEOUT_SECONDS = 30.0


class DocumentExporter:
    """
    Exports markup to PDF through a freshly acquired rendering engine

    Rules:
    1. One engine instance per export, used for exactly one render
    2. The engine is closed on success, failure and cancellation
    3. Launch + render must finish within `timeout` seconds
    4. Every engine failure surfaces as DocumentExportError
    5. No retries; the caller decides whether to try again
    """

    def __init__(
        self,
        engine_factory: Callable[[], RenderingEngine],
        timeout: float = DEFAULT_RENDER_TIMEOUT_SECONDS,
    ):
        self.engine_factory = engine_factory
        self.timeout = timeout

    async def export(self, markup: str) -> bytes:
        """
        Render markup to PDF

        Args:
            markup: Complete HTML document

        Returns:
            PDF bytes (never empty)

        Raises:
            DocumentExportError: engine launch failure, timeout or capture failure
        """
        started = time.monotonic()
        try:
            pdf_bytes = await asyncio.wait_for(self._run(markup), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"PDF export timed out after {self.timeout}s")
            raise DocumentExportError(
                f"Rendering engine did not finish within {self.timeout} seconds"
            ) from e
        except DocumentExportError:
            raise
        except Exception as e:
            logger.error(f"PDF export failed: {e}")
            raise DocumentExportError(f"Rendering engine failed: {e}") from e

        if not pdf_bytes:
            logger.error("PDF export produced an empty document")
            raise DocumentExportError("Rendering engine produced an empty document")

        elapsed_ms = int((time.monotonic() - started) * 1000)
        logger.info(f"PDF exported ({len(pdf_bytes)} bytes) in {elapsed_ms}ms")
        return pdf_bytes

    async def _run(self, markup: str) -> bytes:
        engine = self.engine_factory()
        try:
            await engine.start()
            return await engine.render(markup)
        finally:
            # Runs on cancellation from wait_for too. Shielded so a second
            # cancellation cannot abort the engine shutdown half way.
            await asyncio.shield(engine.close())
