"""Blueprints registered by create_app()."""
