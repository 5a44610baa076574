"""Data models for the page probe."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from pathlib import Path
from urllib.parse import urljoin

DEFAULT_BASE_URL = "http://localhost:5174"
DEFAULT_ADMIN_PATH = "/admin"
DEFAULT_ADMIN_PASSWORD = "admin456"
DEFAULT_OUTPUT_DIR = "tests/e2e/results"

PASSWORD_SELECTOR = 'input[type="password"]'
BUTTON_SELECTOR = "button"
ORDER_MANAGEMENT_TEXT = "Order Management"
ORDER_MANAGEMENT_SELECTOR = f'{BUTTON_SELECTOR}:has-text("{ORDER_MANAGEMENT_TEXT}")'


class SettleStrategy(StrEnum):
    """How the probe waits for the post-login UI to render."""

    DELAY = "delay"  # Fixed blind wait
    SELECTOR = "selector"  # Bounded wait for a button to appear


@dataclass
class ScreenshotConfig:
    """Configuration for screenshot capture."""

    output_dir: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT_DIR))
    before_login_name: str = "debug-admin-page.png"
    after_login_name: str = "debug-admin-after-login.png"
    full_page: bool = True

    @property
    def before_login_path(self) -> Path:
        return self.output_dir / self.before_login_name

    @property
    def after_login_path(self) -> Path:
        return self.output_dir / self.after_login_name


@dataclass
class ProbeConfig:
    """Configuration for a single probe run."""

    base_url: str = DEFAULT_BASE_URL
    admin_path: str = DEFAULT_ADMIN_PATH
    password: str = DEFAULT_ADMIN_PASSWORD
    screenshot: ScreenshotConfig = field(default_factory=ScreenshotConfig)
    settle_strategy: SettleStrategy = SettleStrategy.DELAY
    settle_delay_ms: int = 3000
    settle_timeout_ms: int = 10000
    require_password: bool = False
    viewport_width: int = 1280
    viewport_height: int = 720
    navigation_timeout_ms: int = 30000

    @property
    def target_url(self) -> str:
        """Absolute URL of the admin page."""
        return urljoin(self.base_url.rstrip("/") + "/", self.admin_path.lstrip("/"))


@dataclass
class ConsoleMessage:
    """A console message emitted by the page under test."""

    type: str
    text: str


@dataclass
class ProbeResult:
    """Observations collected during a probe run."""

    url: str
    final_url: str = ""
    content_length: int = 0
    password_visible: bool = False
    login_attempted: bool = False
    authenticated: bool | None = None  # None when no login was attempted
    buttons: list[str] = field(default_factory=list)
    order_management_visible: bool = False
    order_management_count: int = 0
    screenshots: list[str] = field(default_factory=list)
    console_messages: list[ConsoleMessage] = field(default_factory=list)
    duration_seconds: float = 0.0

    def to_dict(self) -> dict:
        """Plain-dict form for JSON output."""
        return asdict(self)
