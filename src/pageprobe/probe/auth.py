"""Password gate — detect and submit the admin password prompt."""

from __future__ import annotations

import logfire
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeout

from pageprobe.probe.errors import SettleTimeoutError
from pageprobe.probe.models import BUTTON_SELECTOR, PASSWORD_SELECTOR, SettleStrategy


class PasswordGate:
    """Interacts with the password prompt guarding the admin page."""

    def __init__(
        self,
        password: str,
        settle_strategy: SettleStrategy = SettleStrategy.DELAY,
        settle_delay_ms: int = 3000,
        settle_timeout_ms: int = 10000,
    ) -> None:
        self._password = password
        self._settle_strategy = settle_strategy
        self._settle_delay_ms = settle_delay_ms
        self._settle_timeout_ms = settle_timeout_ms

    async def is_prompt_visible(self, page: Page) -> bool:
        """Whether a password input is currently visible."""
        return await page.locator(PASSWORD_SELECTOR).is_visible()

    async def submit(self, page: Page) -> None:
        """Fill the password input, press Enter, then wait for the UI to settle."""
        await page.locator(PASSWORD_SELECTOR).fill(self._password)
        await page.keyboard.press("Enter")
        logfire.info("Password submitted")
        await self._settle(page)

    async def _settle(self, page: Page) -> None:
        if self._settle_strategy == SettleStrategy.SELECTOR:
            try:
                await page.wait_for_selector(BUTTON_SELECTOR, timeout=self._settle_timeout_ms)
            except PlaywrightTimeout as e:
                raise SettleTimeoutError(
                    f"No {BUTTON_SELECTOR!r} element appeared within "
                    f"{self._settle_timeout_ms} ms after login"
                ) from e
            return

        # Blind wait; the page gives no signal when the dashboard has rendered
        await page.wait_for_timeout(self._settle_delay_ms)
