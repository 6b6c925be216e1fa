"""
catalog/blueprints/api/resources.py

Class-based REST resources (flask.views.MethodView): one class per URL,
one method per HTTP verb.

- /api/v1/products            ProductListResource  GET, POST
- /api/v1/products/<id>       ProductResource      GET, PUT, PATCH, DELETE

Same service layer as the /products function views, so both styles
validate, audit and fail identically. The list endpoint returns a bare JSON
array; paging metadata travels in X-Total-Count / X-Page / X-Per-Page headers.
"""

from __future__ import annotations

from flask import Blueprint, jsonify, request, url_for
from flask.views import MethodView

from ...schemas import dump_product, dump_products, load_product
from ...services import products as product_service
from ...utils import get_json_body

api_bp = Blueprint("api", __name__, url_prefix="/api/v1")


class ProductListResource(MethodView):
    """Collection resource."""

    def get(self):
        page = product_service.list_products(request.args)

        response = jsonify(dump_products(page["items"]))
        response.headers["X-Total-Count"] = str(page["total"])
        response.headers["X-Page"] = str(page["page"])
        response.headers["X-Per-Page"] = str(page["per_page"])
        return response

    def post(self):
        data = load_product(get_json_body())
        product = product_service.create_product(data)

        response = jsonify(dump_product(product))
        response.status_code = 201
        response.headers["Location"] = url_for("api.product", product_id=product.id)
        return response


class ProductResource(MethodView):
    """Item resource."""

    def get(self, product_id: int):
        return jsonify(dump_product(product_service.get_product(product_id)))

    def put(self, product_id: int):
        return self._update(product_id)

    def patch(self, product_id: int):
        return self._update(product_id)

    def delete(self, product_id: int):
        product = product_service.get_product(product_id)
        product_service.delete_product(product)
        return "", 204

    @staticmethod
    def _update(product_id: int):
        product = product_service.get_product(product_id)
        data = load_product(get_json_body(), partial=True)
        return jsonify(dump_product(product_service.update_product(product, data)))


api_bp.add_url_rule("/products", view_func=ProductListResource.as_view("products"))
api_bp.add_url_rule("/products/<int:product_id>", view_func=ProductResource.as_view("product"))
