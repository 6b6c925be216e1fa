"""
Main blueprint package.

This file just exposes the Blueprint object to be imported in catalog.__init__.
The actual routes are in routes.py.
"""

from .routes import main_bp  # noqa: F401
