"""Exceptions raised by the page probe."""


class ProbeError(Exception):
    """Raised when an interaction with the target page fails."""


class NavigationError(ProbeError):
    """Raised when the target page cannot be reached."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Could not navigate to {url}: {reason}")


class PasswordPromptMissingError(ProbeError):
    """Raised when a password prompt is required but not visible."""


class SettleTimeoutError(ProbeError):
    """Raised when the post-login UI does not render in time."""
