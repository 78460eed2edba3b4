"""
Farkle Configuration.

Environment variables, settings, and logging configuration.
"""

from farkle.config.logs import configure_logging
from farkle.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
