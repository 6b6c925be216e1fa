"""
catalog/__init__.py

Flask application factory for the Product Catalog.

Route groups (each a blueprint):
- main      Hello World, templated greeting, health check
- products  function-view CRUD (/products)
- api       class-based REST resources (/api/v1/products)
- weather   weather provider proxy (/weather)
- textgen   text generation proxy (/generate-text)
- ui        server-rendered pages (/ui)

SQLite is used for dev; any SQLAlchemy URL works through DATABASE_URL,
with Flask-Migrate handling schema changes.
"""

from __future__ import annotations

import click
from flask import Flask

from .errors import register_error_handlers
from .extensions import csrf, db, migrate
from .logger import get_logger

# Blueprint imports kept inside create_app() where possible to reduce import side effects.

logger = get_logger(__name__)


def create_app(config_class: object | str = "config.Config") -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # ----------------------------------------------------------------------
    # Blueprints
    # ----------------------------------------------------------------------
    from .blueprints.main import main_bp
    from .blueprints.products import products_bp
    from .blueprints.api import api_bp
    from .blueprints.weather import weather_bp
    from .blueprints.textgen import textgen_bp
    from .blueprints.ui import ui_bp

    # JSON endpoints are not form posts; CSRF only guards the /ui forms.
    for json_bp in (products_bp, api_bp, textgen_bp):
        csrf.exempt(json_bp)

    app.register_blueprint(main_bp)
    app.register_blueprint(products_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(weather_bp)
    app.register_blueprint(textgen_bp)
    app.register_blueprint(ui_bp)

    register_error_handlers(app)

    # ----------------------------------------------------------------------
    # CLI
    # ----------------------------------------------------------------------
    @app.cli.command("init-db")
    def init_db_command():
        """Create all tables (dev convenience; use `flask db upgrade` otherwise)."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("seed-products")
    def seed_products_command():
        """Seed demo products."""
        from .seed import seed_default_products

        created = seed_default_products()
        click.echo(f"Seeded {created} product(s).")

    logger.info(f"Application created (config={getattr(config_class, '__name__', config_class)})")
    return app
