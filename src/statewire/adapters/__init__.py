"""
Adapters - web framework integrations.
"""

from .fasthtml import configure_app, create_app, render_screen, screen_updates

__all__ = ["configure_app", "create_app", "render_screen", "screen_updates"]
