"""Browser session — one Playwright page owned by a single probe run."""

from __future__ import annotations

import logfire
from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from pageprobe.probe.models import ProbeConfig


class BrowserSession:
    """Opens a Chromium page for one probe run and tears it all down afterwards.

    The session is not reusable: once closed, a new one must be created.
    """

    def __init__(self, config: ProbeConfig, headless: bool = True) -> None:
        self._config = config
        self._headless = headless
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    async def open(self) -> Page:
        """Launch Chromium and return a fresh page sized to the configured viewport."""
        logfire.info("Opening browser session", headless=self._headless)

        self._playwright = await async_playwright().start()
        try:
            self._browser = await self._playwright.chromium.launch(headless=self._headless)
            self._context = await self._browser.new_context(
                viewport={
                    "width": self._config.viewport_width,
                    "height": self._config.viewport_height,
                },
            )
            self._context.set_default_navigation_timeout(self._config.navigation_timeout_ms)
            self._page = await self._context.new_page()
        except BaseException:
            logfire.error("Browser session failed to open", headless=self._headless)
            await self.close()
            raise

        return self._page

    async def close(self) -> None:
        """Close the page's context, the browser and the Playwright driver."""
        self._page = None
        if self._context:
            await self._context.close()
            self._context = None
        if self._browser:
            await self._browser.close()
            self._browser = None
        if self._playwright:
            await self._playwright.stop()
            self._playwright = None
        logfire.info("Browser session closed")

    async def __aenter__(self) -> Page:
        return await self.open()

    async def __aexit__(self, *args: object) -> None:
        await self.close()
