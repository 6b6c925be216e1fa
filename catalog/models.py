"""
Product Catalog – Domain Models

Includes:
- Product: the catalog record used by every CRUD example (HTML, JSON, REST resource)
- AuditLog: CREATE / UPDATE / DELETE trail for products

IMPORTANT:
- Input is never trusted. Payloads are validated in catalog.schemas before
  they reach these models.
- price is stored as Numeric(10, 2); always assign a quantized Decimal.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP

from .extensions import db


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
def _to_decimal(value) -> Decimal:
    """Convert Numeric/None to Decimal safely."""
    if value is None:
        return Decimal("0.00")
    return Decimal(str(value))


def _money(x: Decimal) -> Decimal:
    return x.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


# ---------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------
class Product(db.Model):
    """A sellable item: name, unit price and quantity in stock."""

    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)

    name = db.Column(db.String(120), nullable=False, index=True)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    quantity = db.Column(db.Integer, nullable=False, default=0)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def price_decimal(self) -> Decimal:
        return _money(_to_decimal(self.price))

    def stock_value(self) -> Decimal:
        """price * quantity, rounded to cents."""
        return _money(self.price_decimal * Decimal(self.quantity or 0))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": float(self.price_decimal),
            "quantity": self.quantity,
        }

    def __repr__(self):
        return f"<Product {self.id} {self.name!r}>"


# ---------------------------------------------------------------------
# Audit
# ---------------------------------------------------------------------
class AuditLog(db.Model):
    """Mutation trail for catalog entities."""

    __tablename__ = "audit_logs"

    id = db.Column(db.Integer, primary_key=True)

    entity_type = db.Column(db.String(50), nullable=False, index=True)
    entity_id = db.Column(db.Integer, nullable=False, index=True)

    action = db.Column(db.String(20), nullable=False, index=True)

    before_data = db.Column(db.Text, nullable=True)
    after_data = db.Column(db.Text, nullable=True)

    ip_address = db.Column(db.String(45), nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    def __repr__(self):
        return f"<AuditLog {self.action} {self.entity_type}#{self.entity_id}>"
