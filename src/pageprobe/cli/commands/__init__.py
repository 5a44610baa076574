"""Pageprobe CLI commands."""
