"""Fixtures for unit tests."""

from collections.abc import Callable, Iterable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

ADMIN_URL = "http://localhost:5174/admin"
PASSWORD_SELECTOR = 'input[type="password"]'
ORDER_MANAGEMENT_SELECTOR = 'button:has-text("Order Management")'


def _recorder(calls: list[str], name: str, value: Any = None) -> Callable[..., Any]:
    def record(*_args: Any, **_kwargs: Any) -> Any:
        calls.append(name)
        return value

    return record


def _sequence_recorder(calls: list[str], name: str, values: Iterable[Any]) -> Callable[..., Any]:
    remaining = iter(values)

    def record(*_args: Any, **_kwargs: Any) -> Any:
        calls.append(name)
        return next(remaining)

    return record


@pytest.fixture
def make_page() -> Callable[..., MagicMock]:
    """Build a mock Playwright page for the admin screen.

    Every awaited interaction is appended to ``page.calls`` in order, so tests
    can assert on the sequence of browser operations.
    """

    def factory(
        content: str = "<html><body></body></html>",
        password_visible: bool = False,
        password_visible_after_login: bool = False,
        buttons: list[str] | None = None,
        order_management_visible: bool = False,
        order_management_count: int = 0,
        screenshot_bytes: bytes = b"\x89PNG fake",
    ) -> MagicMock:
        calls: list[str] = []
        page = MagicMock()
        page.calls = calls
        page.url = ADMIN_URL

        page.goto = AsyncMock(side_effect=_recorder(calls, "goto"))
        page.screenshot = AsyncMock(side_effect=_recorder(calls, "screenshot", screenshot_bytes))
        page.content = AsyncMock(side_effect=_recorder(calls, "content", content))
        page.keyboard.press = AsyncMock(side_effect=_recorder(calls, "keyboard.press"))
        page.wait_for_timeout = AsyncMock(side_effect=_recorder(calls, "wait_for_timeout"))
        page.wait_for_selector = AsyncMock(side_effect=_recorder(calls, "wait_for_selector"))

        password_input = MagicMock()
        password_input.is_visible = AsyncMock(
            side_effect=_sequence_recorder(
                calls,
                "password.is_visible",
                [password_visible, password_visible_after_login],
            )
        )
        password_input.fill = AsyncMock(side_effect=_recorder(calls, "password.fill"))

        all_buttons = MagicMock()
        all_buttons.all_text_contents = AsyncMock(
            side_effect=_recorder(calls, "buttons.all_text_contents", list(buttons or []))
        )

        order_button = MagicMock()
        order_button.is_visible = AsyncMock(
            side_effect=_recorder(calls, "order_management.is_visible", order_management_visible)
        )
        order_button.count = AsyncMock(
            side_effect=_recorder(calls, "order_management.count", order_management_count)
        )

        locators = {
            PASSWORD_SELECTOR: password_input,
            "button": all_buttons,
            ORDER_MANAGEMENT_SELECTOR: order_button,
        }
        page.locator = MagicMock(side_effect=lambda selector: locators[selector])
        page.locators = locators
        return page

    return factory
