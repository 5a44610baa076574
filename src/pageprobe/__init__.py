"""Pageprobe — Playwright diagnostics for a password-protected admin page."""

__version__ = "0.1.0"
