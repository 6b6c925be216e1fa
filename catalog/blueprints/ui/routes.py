"""
catalog/blueprints/ui/routes.py

Server-rendered pages.

Includes:
- /ui/products        product table
- /ui/products/new    create form (Flask-WTF, CSRF protected)
- /ui/weather         city search showing the current weather

NOTES:
- The form is validated twice: WTForms for field shape, then
  schemas.load_product() so the HTML path obeys the same rules as the API.
"""

from __future__ import annotations

from flask import Blueprint, flash, redirect, render_template, request, url_for

from ...errors import APIError
from ...forms import ProductForm
from ...models import Product
from ...services import products as product_service
from ...services import weather as weather_service

ui_bp = Blueprint("ui", __name__, url_prefix="/ui")


# -------------------------------------------------------
# PRODUCTS
# -------------------------------------------------------
@ui_bp.route("/products")
def product_list():
    products = Product.query.order_by(Product.name.asc(), Product.id.asc()).all()
    return render_template("ui/product_list.html", products=products)


@ui_bp.route("/products/new", methods=["GET", "POST"])
def create_product():
    form = ProductForm()

    if form.validate_on_submit():
        try:
            data = form.to_product_data()
        except APIError as exc:
            for field, message in (exc.details or {}).items():
                flash(f"{field}: {message}", "danger")
            return render_template("ui/product_form.html", form=form), 400

        product = product_service.create_product(data)
        flash(f"Product '{product.name}' created.", "success")
        return redirect(url_for("ui.product_list"))

    status = 400 if request.method == "POST" else 200
    return render_template("ui/product_form.html", form=form), status


# -------------------------------------------------------
# WEATHER
# -------------------------------------------------------
@ui_bp.route("/weather")
def weather():
    city = (request.args.get("city") or "").strip()
    summary = None

    if city:
        try:
            summary = weather_service.get_weather_summary(city, request.args.get("units"))
        except APIError as exc:
            flash(exc.message, "danger")

    return render_template("ui/weather.html", city=city, summary=summary)
