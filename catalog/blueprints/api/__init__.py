"""
REST API blueprint package (class-based resources under /api/v1).
"""

from .resources import api_bp  # noqa: F401
