"""Page probe module — Playwright-based diagnostics for the admin page."""

from pageprobe.probe.errors import (
    NavigationError,
    PasswordPromptMissingError,
    ProbeError,
    SettleTimeoutError,
)
from pageprobe.probe.models import (
    ConsoleMessage,
    ProbeConfig,
    ProbeResult,
    ScreenshotConfig,
    SettleStrategy,
)
from pageprobe.probe.page_probe import PageProbe

__all__ = [
    "ConsoleMessage",
    "NavigationError",
    "PageProbe",
    "PasswordPromptMissingError",
    "ProbeConfig",
    "ProbeError",
    "ProbeResult",
    "ScreenshotConfig",
    "SettleStrategy",
    "SettleTimeoutError",
]
