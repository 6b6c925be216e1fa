"""
catalog/blueprints/products/routes.py

Product CRUD as plain function views (JSON in, JSON out).

Routes:
- GET    /products               list (page, per_page, q)
- POST   /products               create -> 201 + Location
- GET    /products/<id>          read
- PUT    /products/<id>          update (partial)
- PATCH  /products/<id>          update (partial)
- DELETE /products/<id>          delete -> 204

IMPORTANT:
- Input is never trusted. Every body goes through schemas.load_product().
"""

from __future__ import annotations

from flask import Blueprint, jsonify, request, url_for

from ...schemas import dump_product, load_product
from ...services import products as product_service
from ...utils import get_json_body, paginated_payload

products_bp = Blueprint("products", __name__, url_prefix="/products")


# ---------------------------------------------------------------------
# LIST / CREATE
# ---------------------------------------------------------------------
@products_bp.route("", methods=["GET"])
def list_products():
    page = product_service.list_products(request.args)
    return jsonify(paginated_payload(page))


@products_bp.route("", methods=["POST"])
def create_product():
    data = load_product(get_json_body())
    product = product_service.create_product(data)

    response = jsonify(dump_product(product))
    response.status_code = 201
    response.headers["Location"] = url_for("products.get_product", product_id=product.id)
    return response


# ---------------------------------------------------------------------
# READ / UPDATE / DELETE
# ---------------------------------------------------------------------
@products_bp.route("/<int:product_id>", methods=["GET"])
def get_product(product_id: int):
    product = product_service.get_product(product_id)
    return jsonify(dump_product(product))


@products_bp.route("/<int:product_id>", methods=["PUT", "PATCH"])
def update_product(product_id: int):
    product = product_service.get_product(product_id)
    data = load_product(get_json_body(), partial=True)

    product = product_service.update_product(product, data)
    return jsonify(dump_product(product))


@products_bp.route("/<int:product_id>", methods=["DELETE"])
def delete_product(product_id: int):
    product = product_service.get_product(product_id)
    product_service.delete_product(product)
    return "", 204
