from .routes import weather_bp  # noqa: F401
