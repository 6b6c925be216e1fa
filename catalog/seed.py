"""
catalog/seed.py

Seed demo products.

Rules:
- Safe to run multiple times (idempotent): products are matched by name.
- Existing products are left untouched (their price/quantity may have been edited).
"""

from __future__ import annotations

from decimal import Decimal

from .audit import log_action, serialize_model
from .extensions import db
from .logger import get_logger
from .models import Product

logger = get_logger(__name__)


DEFAULT_PRODUCTS = [
    # name, price, quantity
    ("Laptop", Decimal("999.99"), 10),
    ("Mechanical Keyboard", Decimal("89.50"), 25),
    ("Wireless Mouse", Decimal("24.99"), 40),
    ("27\" Monitor", Decimal("279.00"), 8),
    ("USB-C Hub", Decimal("39.90"), 0),
]


def seed_default_products() -> int:
    """Create the DEFAULT_PRODUCTS that don't exist yet. Returns how many were created."""
    created = 0

    for name, price, quantity in DEFAULT_PRODUCTS:
        if Product.query.filter_by(name=name).first():
            continue

        product = Product(name=name, price=price, quantity=quantity)
        db.session.add(product)
        db.session.flush()
        log_action(product, "CREATE", after=serialize_model(product))
        created += 1

    db.session.commit()
    logger.info(f"Seeded {created} product(s).")
    return created
