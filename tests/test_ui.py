from unittest.mock import patch

import pytest
from bs4 import BeautifulSoup

from catalog.errors import NotFoundError
from catalog.models import Product


pytestmark = pytest.mark.web


def test_product_list_page(client, make_product):
    make_product(name="Zebra Plush", price="12.00", quantity=1)
    make_product(name="Abacus", price="7.5", quantity=9)

    response = client.get("/ui/products")

    assert response.status_code == 200
    soup = BeautifulSoup(response.data, "html.parser")
    rows = soup.select('table[data-testid="product-table"] tbody tr')
    assert [row.find_all("td")[1].text for row in rows] == ["Abacus", "Zebra Plush"]
    assert rows[0].find_all("td")[2].text == "7.50"


def test_product_list_page_empty(client):
    response = client.get("/ui/products")
    assert "No products yet." in response.data.decode("utf-8")


def test_new_product_form_renders(client):
    response = client.get("/ui/products/new")

    assert response.status_code == 200
    soup = BeautifulSoup(response.data, "html.parser")
    assert {i.get("name") for i in soup.find_all("input")} >= {"name", "price", "quantity"}


def test_new_product_form_creates_and_redirects(client, db):
    response = client.post(
        "/ui/products/new",
        data={"name": "Globe", "price": "35.20", "quantity": "2"},
        follow_redirects=True,
    )

    assert response.status_code == 200
    html = response.data.decode("utf-8")
    assert "Product &#39;Globe&#39; created." in html or "Product 'Globe' created." in html

    product = Product.query.filter_by(name="Globe").one()
    assert product.quantity == 2
    assert str(product.price_decimal) == "35.20"


def test_new_product_form_invalid_rerenders(client):
    response = client.post("/ui/products/new", data={"name": "", "price": "-1", "quantity": "0"})

    assert response.status_code == 400
    html = response.data.decode("utf-8")
    assert "Name is required" in html
    assert Product.query.count() == 0


def test_new_product_form_requires_csrf_token_when_enabled(app, client):
    app.config["WTF_CSRF_ENABLED"] = True

    response = client.post("/ui/products/new", data={"name": "Globe", "price": "1", "quantity": "1"})

    assert response.status_code == 400
    assert Product.query.count() == 0


@patch("catalog.services.weather.get_weather_summary")
def test_weather_page_shows_summary(mock_summary, client):
    mock_summary.return_value = {
        "city": "Oslo", "country": "NO", "temperature": 3.2, "feels_like": 1.0,
        "humidity": 80, "description": "light snow", "wind_speed": 2.0, "units": "metric",
    }

    response = client.get("/ui/weather?city=Oslo")

    soup = BeautifulSoup(response.data, "html.parser")
    card = soup.select_one('[data-testid="weather-card"]')
    assert card is not None
    assert "Oslo, NO" in card.text
    assert "light snow" in card.text


@patch("catalog.services.weather.get_weather_summary")
def test_weather_page_flashes_errors(mock_summary, client):
    mock_summary.side_effect = NotFoundError("City 'Atlantis' not found.")

    response = client.get("/ui/weather?city=Atlantis")

    assert response.status_code == 200
    assert "City &#39;Atlantis&#39; not found." in response.data.decode("utf-8")


def test_weather_page_without_city_does_not_call_provider(client):
    with patch("catalog.services.weather.get_weather_summary") as mock_summary:
        response = client.get("/ui/weather")
    assert response.status_code == 200
    mock_summary.assert_not_called()


def test_ui_404_is_html(client):
    response = client.get("/ui/missing-page")
    assert response.status_code == 404
    assert b"Not Found" in response.data
    assert response.content_type.startswith("text/html")


def test_product_list_shows_stock_value(client, make_product):
    make_product(name="Pen", price="1.50", quantity=4)

    soup = BeautifulSoup(client.get("/ui/products").data, "html.parser")
    row = soup.select_one('table[data-testid="product-table"] tbody tr')
    assert row.find_all("td")[4].text == "6.00"


@patch("catalog.services.products.create_product")
def test_ui_unexpected_error_renders_html_page(mock_create, client):
    mock_create.side_effect = RuntimeError("disk on fire")

    response = client.post("/ui/products/new", data={"name": "Globe", "price": "3", "quantity": "1"})

    assert response.status_code == 500
    assert response.content_type.startswith("text/html")
    assert b"500 Internal Server Error" in response.data


def test_new_product_form_rejects_huge_quantity(client):
    response = client.post(
        "/ui/products/new",
        data={"name": "Grain", "price": "1", "quantity": str(2**31)},
    )
    assert response.status_code == 400
    assert Product.query.count() == 0
