"""
Weather proxy.

GET /weather?city=<name>[&units=metric|imperial|standard]

Forwards to the weather provider and returns a flattened summary.
"""

from flask import Blueprint, jsonify, request

from ...services import weather as weather_service

weather_bp = Blueprint("weather", __name__)


@weather_bp.route("/weather", methods=["GET"])
def get_weather():
    summary = weather_service.get_weather_summary(
        request.args.get("city"),
        request.args.get("units"),
    )
    return jsonify(summary)
