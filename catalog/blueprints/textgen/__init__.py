from .routes import textgen_bp  # noqa: F401
