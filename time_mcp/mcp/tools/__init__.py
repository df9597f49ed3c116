"""FastMCP tool registrations grouped by domain."""

from . import clock  # noqa: F401

__all__ = ["clock"]
