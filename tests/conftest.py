"""Shared pytest fixtures for the app, DB and product factories."""

from decimal import Decimal

import pytest

from catalog import create_app
from catalog.extensions import db as _db
from catalog.models import Product
from catalog.services import textgen
from config import TestingConfig


@pytest.fixture()
def app():
    """Create a Flask app on an in-memory database with a fresh schema."""
    app = create_app(TestingConfig)

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def client(app):
    """Provide a Flask test client bound to the test app."""
    return app.test_client()


@pytest.fixture()
def runner(app):
    """Provide a Flask CLI runner for command-oriented tests."""
    return app.test_cli_runner()


@pytest.fixture()
def db(app):
    return _db


@pytest.fixture()
def make_product(db):
    """Return a factory inserting a Product directly through the ORM."""

    def _make(name="Widget", price="9.99", quantity=3):
        product = Product(name=name, price=Decimal(price), quantity=quantity)
        db.session.add(product)
        db.session.commit()
        return product

    return _make


@pytest.fixture(autouse=True)
def reset_genai_configuration(monkeypatch):
    """Forget which Gemini key was configured so each test starts clean."""
    monkeypatch.setattr(textgen, "_configured_key", None)
