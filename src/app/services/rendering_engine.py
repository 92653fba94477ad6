"""Rendering Engine Interface

A rendering engine is an isolated, heavyweight resource (typically a headless
browser process). One instance serves exactly one start/render/close cycle and
close() is always called, even when start() or render() fail.
"""

from abc import ABC, abstractmethod


class RenderingEngine(ABC):
    """Single-use capability that prints markup to PDF bytes"""

    @abstractmethod
    async def start(self) -> None:
        """Launch the engine"""
        pass

    @abstractmethod
    async def render(self, markup: str) -> bytes:
        """
        Load markup, wait for it to settle and capture it as PDF

        Args:
            markup: Complete HTML document

        Returns:
            PDF document as bytes
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Terminate the engine; must be safe after a failed or partial start"""
        pass
