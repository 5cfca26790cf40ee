"""Core app configuration, database and security."""

from videobelajar.core.config import get_settings, settings

__all__ = ["get_settings", "settings"]
