"""Core pageprobe functionality."""

from pageprobe.core.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
