"""Page probe — drive the admin page through the login sequence and record what it shows."""

from __future__ import annotations

import time

import logfire
from playwright.async_api import ConsoleMessage as PlaywrightConsoleMessage
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from pageprobe.probe.auth import PasswordGate
from pageprobe.probe.browser import BrowserSession
from pageprobe.probe.errors import NavigationError, PasswordPromptMissingError
from pageprobe.probe.models import (
    BUTTON_SELECTOR,
    ORDER_MANAGEMENT_SELECTOR,
    ConsoleMessage,
    ProbeConfig,
    ProbeResult,
)
from pageprobe.probe.screenshot import ScreenshotManager


class PageProbe:
    """Runs the fixed probe sequence against the configured admin page.

    The sequence is: navigate, screenshot, measure markup, check for a
    password prompt and, only when one is visible, log in, wait, screenshot
    again and enumerate the buttons on the resulting page.
    """

    def __init__(
        self,
        config: ProbeConfig,
        screenshot_manager: ScreenshotManager | None = None,
        gate: PasswordGate | None = None,
    ) -> None:
        self._config = config
        self._screenshots = screenshot_manager or ScreenshotManager(config.screenshot)
        self._gate = gate or PasswordGate(
            password=config.password,
            settle_strategy=config.settle_strategy,
            settle_delay_ms=config.settle_delay_ms,
            settle_timeout_ms=config.settle_timeout_ms,
        )

    async def run(self, headless: bool = True) -> ProbeResult:
        """Open a browser session, probe the page, and close the session."""
        async with BrowserSession(self._config, headless=headless) as page:
            return await self.probe(page)

    async def probe(self, page: Page) -> ProbeResult:
        """Run the probe sequence on an already open page."""
        start_time = time.monotonic()
        url = self._config.target_url
        result = ProbeResult(url=url)

        def on_console(message: PlaywrightConsoleMessage) -> None:
            captured = ConsoleMessage(type=message.type, text=message.text)
            result.console_messages.append(captured)
            logfire.info("Browser console", type=captured.type, text=captured.text)

        page.on("console", on_console)

        logfire.info("Probing page", url=url)
        await self._navigate(page, url)
        result.final_url = page.url

        result.screenshots.append(await self._screenshots.capture_before_login(page))

        content = await page.content()
        result.content_length = len(content)
        logfire.info("Page content length", length=result.content_length)

        result.password_visible = await self._gate.is_prompt_visible(page)
        logfire.info("Password input visible", visible=result.password_visible)

        if not result.password_visible:
            if self._config.require_password:
                raise PasswordPromptMissingError(f"No visible password input on {page.url}")
            result.duration_seconds = time.monotonic() - start_time
            return result

        result.login_attempted = True
        await self._gate.submit(page)

        result.screenshots.append(await self._screenshots.capture_after_login(page))

        result.buttons = await page.locator(BUTTON_SELECTOR).all_text_contents()
        logfire.info("All buttons", buttons=result.buttons)

        target_button = page.locator(ORDER_MANAGEMENT_SELECTOR)
        result.order_management_visible = await target_button.is_visible()
        logfire.info("Order Management button visible", visible=result.order_management_visible)
        result.order_management_count = await target_button.count()
        logfire.info("Order Management button count", count=result.order_management_count)

        result.authenticated = not await self._gate.is_prompt_visible(page)
        if not result.authenticated:
            logfire.warn("Password prompt still visible after login", url=page.url)

        result.duration_seconds = time.monotonic() - start_time
        logfire.info(
            "Probe complete",
            url=url,
            authenticated=result.authenticated,
            duration_seconds=round(result.duration_seconds, 2),
        )
        return result

    async def _navigate(self, page: Page, url: str) -> None:
        try:
            await page.goto(url)
        except PlaywrightError as e:
            logfire.error("Navigation failed", url=url, error=str(e))
            raise NavigationError(url, e.message) from e
