"""
UI blueprint package.

Server-rendered pages (Jinja + Flask-WTF) under /ui.
"""

from .routes import ui_bp  # noqa: F401
