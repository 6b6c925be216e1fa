"""
catalog/schemas.py

Product payload validation and serialization.

load_product() turns an untrusted JSON body into a clean dict ready to be
assigned to a Product; dump_product() goes the other way. All field errors
are collected and raised together as one ValidationError.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Iterable

from .errors import ValidationError
from .models import Product

NAME_MAX_LENGTH = 120
PRICE_MAX = Decimal("99999999.99")  # Numeric(10, 2)
QUANTITY_MAX = 2**31 - 1  # portable INTEGER range
PRODUCT_FIELDS = ("name", "price", "quantity")


def _parse_name(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError("must be a string")
    name = value.strip()
    if not name:
        raise ValueError("must not be blank")
    if len(name) > NAME_MAX_LENGTH:
        raise ValueError(f"must be at most {NAME_MAX_LENGTH} characters")
    return name


def _parse_price(value: Any) -> Decimal:
    # bool is an int subclass; True is not a price
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise ValueError("must be a number")
    raw = str(value).strip().replace(",", ".")
    try:
        price = Decimal(raw)
    except (InvalidOperation, ValueError):
        raise ValueError("must be a number")
    if not price.is_finite():
        raise ValueError("must be a number")
    # Range check before quantize: huge exponents overflow the decimal context
    if price < 0:
        raise ValueError("must be zero or positive")
    if price > PRICE_MAX:
        raise ValueError(f"must be at most {PRICE_MAX}")
    price = price.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return price


def _parse_quantity(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("must be an integer")
    if isinstance(value, int):
        quantity = value
    elif isinstance(value, str):
        try:
            quantity = int(value.strip(), 10)
        except ValueError:
            raise ValueError("must be an integer")
    else:
        raise ValueError("must be an integer")
    if quantity < 0:
        raise ValueError("must be zero or positive")
    if quantity > QUANTITY_MAX:
        raise ValueError(f"must be at most {QUANTITY_MAX}")
    return quantity


_PARSERS = {
    "name": _parse_name,
    "price": _parse_price,
    "quantity": _parse_quantity,
}


def load_product(payload: Any, *, partial: bool = False) -> dict:
    """
    Validate a product payload.

    - partial=False (create): name and price are required, quantity defaults to 0.
    - partial=True (update): only the fields present are validated, but at
      least one of them must be present.

    Unknown keys are ignored.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object.")

    errors: dict[str, str] = {}
    data: dict[str, Any] = {}

    for field in PRODUCT_FIELDS:
        if field not in payload:
            continue
        try:
            data[field] = _PARSERS[field](payload[field])
        except ValueError as exc:
            errors[field] = str(exc)

    if not partial:
        for field in ("name", "price"):
            if field not in payload:
                errors[field] = "is required"
        if "quantity" not in payload and "quantity" not in errors:
            data["quantity"] = 0
    elif not errors and not data:
        raise ValidationError(
            "Provide at least one of: name, price, quantity.",
            details={"fields": list(PRODUCT_FIELDS)},
        )

    if errors:
        raise ValidationError("Invalid product data.", details=errors)
    return data


def dump_product(product: Product) -> dict:
    return product.to_dict()


def dump_products(products: Iterable[Product]) -> list[dict]:
    return [dump_product(p) for p in products]
