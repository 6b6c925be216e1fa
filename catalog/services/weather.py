"""
catalog/services/weather.py

Thin client for the OpenWeatherMap "current weather" endpoint.

The provider's response shape is its own; summarize() picks the handful of
fields the /weather endpoint and the /ui/weather page show.
"""

from __future__ import annotations

from typing import Any, Optional

import requests
from flask import current_app

from ..errors import (
    NotFoundError,
    ServiceUnavailableError,
    UpstreamServiceError,
    UpstreamTimeoutError,
    ValidationError,
)
from ..logger import get_logger

logger = get_logger(__name__)

SUPPORTED_UNITS = ("metric", "imperial", "standard")


def _validate(city: Optional[str], units: Optional[str]) -> tuple[str, str]:
    city = (city or "").strip()
    if not city:
        raise ValidationError("Missing required parameter 'city'.", details={"city": "is required"})

    units = (units or "metric").strip().lower()
    if units not in SUPPORTED_UNITS:
        raise ValidationError(
            f"Unsupported units '{units}'.",
            details={"units": f"must be one of {', '.join(SUPPORTED_UNITS)}"},
        )
    return city, units


def fetch_current_weather(city: Optional[str], units: Optional[str] = None) -> dict:
    """
    Query the provider for the current weather in a city.

    Returns the raw provider JSON. Raises:
    - ValidationError: missing city / bad units
    - ServiceUnavailableError: WEATHER_API_KEY not configured
    - NotFoundError: provider does not know the city
    - UpstreamTimeoutError / UpstreamServiceError: anything else going wrong upstream
    """
    city, units = _validate(city, units)

    api_key = current_app.config.get("WEATHER_API_KEY")
    if not api_key:
        raise ServiceUnavailableError("Weather service is not configured.")

    params = {"q": city, "appid": api_key, "units": units}
    try:
        response = requests.get(
            current_app.config["WEATHER_API_URL"],
            params=params,
            timeout=current_app.config["WEATHER_TIMEOUT"],
        )
    except requests.Timeout:
        logger.warning(f"Weather provider timed out for city={city!r}")
        raise UpstreamTimeoutError("Weather provider did not answer in time.")
    except requests.RequestException as exc:
        logger.error(f"Weather provider unreachable: {exc}")
        raise UpstreamServiceError("Weather provider is unreachable.")

    if response.status_code == 404:
        raise NotFoundError(f"City '{city}' not found.")
    if response.status_code == 401:
        logger.error("Weather provider rejected the API key (401).")
        raise UpstreamServiceError("Weather provider rejected the request.")
    if not response.ok:
        logger.error(f"Weather provider returned HTTP {response.status_code} for city={city!r}")
        raise UpstreamServiceError(
            "Weather provider returned an error.",
            details={"upstream_status": response.status_code},
        )

    try:
        body = response.json()
    except ValueError:
        raise UpstreamServiceError("Weather provider returned invalid JSON.")
    if not isinstance(body, dict):
        raise UpstreamServiceError("Weather provider returned an unexpected payload.")

    body["_units"] = units
    return body


def summarize(body: dict[str, Any]) -> dict:
    """Flatten a provider payload into the fields this app exposes."""
    main = body.get("main") or {}
    wind = body.get("wind") or {}
    sys_info = body.get("sys") or {}
    weather = body.get("weather") or []
    description = weather[0].get("description") if weather and isinstance(weather[0], dict) else None

    return {
        "city": body.get("name"),
        "country": sys_info.get("country"),
        "temperature": main.get("temp"),
        "feels_like": main.get("feels_like"),
        "humidity": main.get("humidity"),
        "description": description,
        "wind_speed": wind.get("speed"),
        "units": body.get("_units", "metric"),
    }


def get_weather_summary(city: Optional[str], units: Optional[str] = None) -> dict:
    return summarize(fetch_current_weather(city, units))
