"""
Main routes

Provides:
- /               plain-text Hello World
- /hello/<name>   templated greeting
- /health         liveness check (JSON)
"""

from flask import Blueprint, jsonify, render_template

main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def index():
    """The smallest possible Flask view."""
    return "Hello, World!"


@main_bp.route("/hello/<name>")
def hello(name: str):
    """Greeting rendered through Jinja (autoescaped)."""
    return render_template("main/hello.html", name=name.strip() or "World")


@main_bp.route("/health")
def health():
    return jsonify({"status": "ok"}), 200
