"""
Products blueprint package (function-view CRUD under /products).

Must expose products_bp for app factory registration.
"""

from .routes import products_bp  # noqa: F401
