"""
Utility functions shared across the app. This includes:
- get_json_body: read a request body that must be a JSON object.
- paginated_payload: shape a products.list_products() result for JSON output.
"""

from flask import request

from .errors import ValidationError
from .schemas import dump_products


def get_json_body() -> dict:
    """
    Return the parsed JSON body.

    Malformed JSON is rejected by Flask itself (400); a body that parses but
    is not an object (list, string, null) is rejected here.
    """
    payload = request.get_json()
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object.")
    return payload


def paginated_payload(page: dict) -> dict:
    return {
        "items": dump_products(page["items"]),
        "page": page["page"],
        "per_page": page["per_page"],
        "total": page["total"],
        "pages": page["pages"],
    }
