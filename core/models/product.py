# =============================================================================
# core/models/product.py - Product Schemas
# =============================================================================
# These models define the contract for catalog products:
# - ProductCreate: Raw client payload for a new product, with field rules
# - Product: Normalized product as it is written to (and read from) storage
#
# A product belongs to one category via category_id. The category itself
# is not modeled here.
# =============================================================================

import math
import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

# Optional "$", digits (optionally grouped by thousands), up to two decimals
CURRENCY_PATTERN = re.compile(r"^\$?(\d{1,3}(,\d{3})+|\d+)(\.\d{1,2})?$")
WHOLE_NUMBER_PATTERN = re.compile(r"^[0-9]+$")
PRICE_TOLERANCE = 1e-9


def _whole_number(value: Any) -> int:
    """Coerce an int or digit-only string to a non-negative int."""
    if isinstance(value, bool):
        raise ValueError("must be a whole number")
    if isinstance(value, int):
        if value < 0:
            raise ValueError("must not be negative")
        return value
    if isinstance(value, str) and WHOLE_NUMBER_PATTERN.fullmatch(value):
        return int(value)
    raise ValueError("must be a whole number")


def _currency(value: Any) -> float:
    """Coerce a currency-formatted number or string to a float."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError("must be a currency amount")
    if isinstance(value, str):
        if not CURRENCY_PATTERN.fullmatch(value):
            raise ValueError("must be a non-negative currency amount")
        return float(value.replace("$", "").replace(",", ""))

    if not math.isfinite(value) or value < 0:
        raise ValueError("must be a non-negative currency amount")
    # At most two decimals; tolerates binary noise such as 0.1 + 0.2
    cents = round(value, 2)
    if not math.isclose(cents, value, rel_tol=0.0, abs_tol=PRICE_TOLERANCE):
        raise ValueError("must have at most two decimal places")
    return float(cents)


class ProductCreate(BaseModel):
    """
    Schema for a new product as submitted by a client.

    Field rules are applied before type coercion so that only clean input
    passes (e.g. "10" is a valid stock level, "10.5", "-1" and True are not).
    Unknown keys, including any client-supplied id, are ignored.

    Example:
        {
            "category_id": 1,
            "product_name": "Widget",
            "product_description": "A widget",
            "product_stock": 10,
            "product_price": "9.99"
        }
    """

    category_id: int = Field(..., ge=0, description="Category the product belongs to")
    product_name: str = Field(..., min_length=1, description="Display name")
    product_description: str = Field(..., min_length=1, description="Long description")
    product_stock: int = Field(..., ge=0, description="Units in stock")
    product_price: float = Field(..., ge=0, description="Unit price")

    @field_validator("category_id", "product_stock", mode="before")
    @classmethod
    def check_whole_number(cls, value: Any) -> int:
        return _whole_number(value)

    @field_validator("product_name", "product_description", mode="before")
    @classmethod
    def check_text(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("must be a non-empty string")
        return value

    @field_validator("product_price", mode="before")
    @classmethod
    def check_price(cls, value: Any) -> float:
        return _currency(value)


class Product(BaseModel):
    """
    A catalog product.

    id is 0 until storage assigns one; a persisted product always has a
    positive id.
    """

    id: int = Field(default=0, ge=0)
    category_id: int = Field(..., ge=0)
    product_name: str
    product_description: str
    product_stock: int = Field(..., ge=0)
    product_price: float = Field(..., ge=0)
