"""
Farkle Console Interface.

Terminal prompts, display, and the application entry point.
"""

from farkle.ui.console import ConsoleDisplay, ConsolePlayer, KeepSelection

__all__ = ["ConsoleDisplay", "ConsolePlayer", "KeepSelection"]
