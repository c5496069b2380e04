# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the product models to ensure:
# - Valid data is accepted and coerced correctly
# - Invalid data raises ValidationError
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import Product, ProductCreate


class TestProductCreate:
    """Tests for ProductCreate field rules."""

    def test_valid_payload(self, new_product_payload):
        product = ProductCreate(**new_product_payload)

        assert product.category_id == 1
        assert product.product_stock == 10
        assert product.product_price == 9.99
        assert product.product_name == "Widget"

    def test_numeric_strings_are_coerced(self, new_product_payload):
        new_product_payload.update(category_id="3", product_stock="0")

        product = ProductCreate(**new_product_payload)

        assert product.category_id == 3
        assert product.product_stock == 0

    @pytest.mark.parametrize("price, expected", [
        (0, 0.0),
        (12, 12.0),
        (9.5, 9.5),
        ("10", 10.0),
        ("$4.20", 4.2),
        ("1,299.99", 1299.99),
        ("$1,000", 1000.0),
    ])
    def test_currency_formats(self, new_product_payload, price, expected):
        new_product_payload["product_price"] = price

        assert ProductCreate(**new_product_payload).product_price == expected

    @pytest.mark.parametrize("price, expected", [
        (1e17, 1e17),
        (10**17, 1e17),
        (0.1 + 0.2, 0.3),
        (19.99, 19.99),
    ])
    def test_numeric_prices_checked_by_value(self, new_product_payload, price, expected):
        """A number passes whenever the same amount written as a string would."""
        new_product_payload["product_price"] = price

        assert ProductCreate(**new_product_payload).product_price == expected

    @pytest.mark.parametrize("price", [
        "-1.00", -5, -0.5, 9.999, "9.999", "abc", "", "1,00", "$", None, True,
        float("nan"), float("inf"),
    ])
    def test_rejects_bad_prices(self, new_product_payload, price):
        new_product_payload["product_price"] = price

        with pytest.raises(ValidationError):
            ProductCreate(**new_product_payload)

    @pytest.mark.parametrize("field", ["category_id", "product_stock"])
    @pytest.mark.parametrize("value", [-1, "-1", "1.5", 2.0, "ten", True, None, " 4"])
    def test_rejects_bad_whole_numbers(self, new_product_payload, field, value):
        new_product_payload[field] = value

        with pytest.raises(ValidationError):
            ProductCreate(**new_product_payload)

    @pytest.mark.parametrize("field", ["product_name", "product_description"])
    @pytest.mark.parametrize("value", ["", "   ", None, 42])
    def test_rejects_bad_text(self, new_product_payload, field, value):
        new_product_payload[field] = value

        with pytest.raises(ValidationError):
            ProductCreate(**new_product_payload)

    def test_missing_field(self, new_product_payload):
        del new_product_payload["product_description"]

        with pytest.raises(ValidationError):
            ProductCreate(**new_product_payload)

    def test_client_id_is_ignored(self, new_product_payload):
        product = ProductCreate(id=99, **new_product_payload)

        assert "id" not in product.model_dump()


class TestProduct:
    """Tests for the Product model."""

    def test_defaults_to_unsaved_id(self):
        product = Product(
            category_id=1,
            product_name="Pen",
            product_description="Blue",
            product_stock=1,
            product_price=1.0,
        )

        assert product.id == 0

    def test_rejects_negative_stock(self):
        with pytest.raises(ValidationError):
            Product(
                category_id=1,
                product_name="Pen",
                product_description="Blue",
                product_stock=-1,
                product_price=1.0,
            )
