"""Core module - Configuration."""

from proposal_bridge.core.config import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
