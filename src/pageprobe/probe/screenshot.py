"""Screenshot manager — capture full-page screenshots to fixed paths."""

from __future__ import annotations

from pathlib import Path

import logfire
from playwright.async_api import Page

from pageprobe.probe.models import ScreenshotConfig


class ScreenshotManager:
    """Captures screenshots and writes them to the configured artifact paths.

    Each capture point has one fixed path; a new run overwrites the file
    left by the previous one.
    """

    def __init__(self, config: ScreenshotConfig | None = None) -> None:
        self._config = config or ScreenshotConfig()

    @property
    def output_dir(self) -> Path:
        return self._config.output_dir

    async def capture(self, page: Page) -> bytes:
        """Capture a PNG screenshot of the current page."""
        raw_bytes = await page.screenshot(full_page=self._config.full_page, type="png")

        logfire.info(
            "Screenshot captured",
            url=page.url,
            size_kb=len(raw_bytes) // 1024,
        )
        return raw_bytes

    async def capture_to(self, page: Page, path: Path) -> str:
        """Capture a screenshot and write it to ``path``, replacing any existing file."""
        raw_bytes = await self.capture(page)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(raw_bytes)
        logfire.info("Screenshot saved", path=str(path))
        return str(path)

    async def capture_before_login(self, page: Page) -> str:
        return await self.capture_to(page, self._config.before_login_path)

    async def capture_after_login(self, page: Page) -> str:
        return await self.capture_to(page, self._config.after_login_path)
