"""
catalog/services/products.py

Product CRUD used by both the function-view blueprint (/products) and the
class-based REST resources (/api/v1/products).

Transaction pattern (kept for every mutation):
    db.session.flush() -> log_action(...) -> db.session.commit()
so the audit entry lands in the same transaction as the change.
"""

from __future__ import annotations

from typing import Optional

from flask import current_app

from ..audit import log_action, serialize_model
from ..errors import NotFoundError, ValidationError
from ..extensions import db
from ..logger import get_logger
from ..models import Product

logger = get_logger(__name__)


def _parse_positive_int(value: Optional[str], field: str, default: int) -> int:
    """Parse a positive int from query args. Empty -> default."""
    if value is None or str(value).strip() == "":
        return default
    try:
        number = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"'{field}' must be an integer.", details={field: "must be an integer"})
    if number < 1:
        raise ValidationError(f"'{field}' must be >= 1.", details={field: "must be >= 1"})
    return number


def list_products(args) -> dict:
    """
    Paginated, optionally filtered listing.

    Query args:
    - page (default 1)
    - per_page (default PRODUCTS_PER_PAGE, capped at PRODUCTS_MAX_PER_PAGE)
    - q: case-insensitive substring of the name
    """
    page = _parse_positive_int(args.get("page"), "page", 1)
    per_page = _parse_positive_int(
        args.get("per_page"), "per_page", current_app.config["PRODUCTS_PER_PAGE"]
    )
    per_page = min(per_page, current_app.config["PRODUCTS_MAX_PER_PAGE"])

    query = Product.query
    q = (args.get("q") or "").strip()
    if q:
        query = query.filter(Product.name.ilike(f"%{q}%"))

    pagination = query.order_by(Product.id.asc()).paginate(
        page=page, per_page=per_page, error_out=False
    )
    return {
        "items": pagination.items,
        "page": pagination.page,
        "per_page": pagination.per_page,
        "total": pagination.total,
        "pages": pagination.pages,
    }


def get_product(product_id: int) -> Product:
    product = db.session.get(Product, product_id)
    if product is None:
        raise NotFoundError(f"Product {product_id} not found.")
    return product


def create_product(data: dict) -> Product:
    """Create a product from already validated data (see schemas.load_product)."""
    product = Product(**data)
    db.session.add(product)
    db.session.flush()

    log_action(product, "CREATE", after=serialize_model(product))
    db.session.commit()

    logger.info(f"Product created: id={product.id} name={product.name!r}")
    return product


def update_product(product: Product, data: dict) -> Product:
    before_snapshot = serialize_model(product)

    for field, value in data.items():
        setattr(product, field, value)
    db.session.flush()

    log_action(product, "UPDATE", before=before_snapshot, after=serialize_model(product))
    db.session.commit()

    logger.info(f"Product updated: id={product.id} fields={sorted(data)}")
    return product


def delete_product(product: Product) -> None:
    before_snapshot = serialize_model(product)

    log_action(product, "DELETE", before=before_snapshot)
    db.session.delete(product)
    db.session.commit()

    logger.info(f"Product deleted: id={before_snapshot['id']}")
