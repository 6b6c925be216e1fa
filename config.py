"""
Application configuration.
This module defines the configuration settings for the Flask application, including database connection, secret key,
third-party API credentials and logging. It uses environment variables (optionally loaded from a .env file) for
sensitive information and defaults for development. In production, make sure to set the appropriate environment
variables and secure the secret key.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load variables from .env (if present) before reading them below
load_dotenv(BASE_DIR / ".env")


class Config:
    """Base configuration shared by all environments."""

    # IMPORTANT: change this in production
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-change-me-please")

    # Database: SQLite for development (simple file in project folder)
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'catalog.db'}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # CSRF protection for the HTML forms (JSON blueprints are exempted in create_app)
    WTF_CSRF_ENABLED = True

    # App UI name (used in templates)
    APP_NAME = "Product Catalog"

    # Pagination for product listings
    PRODUCTS_PER_PAGE = int(os.environ.get("PRODUCTS_PER_PAGE", "20"))
    PRODUCTS_MAX_PER_PAGE = 100

    # Weather provider (OpenWeatherMap current weather endpoint)
    WEATHER_API_KEY = os.environ.get("WEATHER_API_KEY")
    WEATHER_API_URL = os.environ.get(
        "WEATHER_API_URL",
        "https://api.openweathermap.org/data/2.5/weather",
    )
    WEATHER_TIMEOUT = float(os.environ.get("WEATHER_TIMEOUT", "5"))

    # Text generation (Google Generative AI)
    GOOGLE_API_KEY = os.environ.get("GOOGLE_API_KEY")
    GENAI_MODEL = os.environ.get("GENAI_MODEL", "gemini-2.5-flash")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class TestingConfig(Config):
    """Configuration used by the test-suite: in-memory DB, no CSRF, no real keys."""

    TESTING = True
    SECRET_KEY = "testing"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    WTF_CSRF_ENABLED = False

    WEATHER_API_KEY = "test-weather-key"
    GOOGLE_API_KEY = "test-google-key"
