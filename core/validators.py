# =============================================================================
# core/validators.py - Input Validation
# =============================================================================
# Gates malformed input before it reaches storage. Validators never raise:
# they return the normalized value, or None when the input is rejected.
# =============================================================================

import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from core.models.product import Product, ProductCreate
from lib.utils import escape_html

logger = logging.getLogger(__name__)

POSITIVE_INT_PATTERN = re.compile(r"^[0-9]+$")


def validate_id(value: Any) -> int | None:
    """
    Validate a raw identifier, e.g. a route parameter.

    Accepts a string of ASCII digits or an int, as long as the value is
    greater than zero. Signs, whitespace, decimals and booleans are rejected.

    Returns:
        The id as an int, or None if it is not a clean positive integer
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and POSITIVE_INT_PATTERN.fullmatch(value):
        number = int(value)
        return number if number > 0 else None
    return None


def validate_new_product(form_product: Any) -> Product | None:
    """
    Validate a new product payload and build a normalized Product.

    On success the product has id=0, numeric fields coerced and the text
    fields HTML-escaped. On failure only a log line is emitted; the caller
    gets None and no detail about which field failed.

    Args:
        form_product: Parsed request body (expected to be a JSON object)

    Returns:
        Product ready to insert, or None if the payload is invalid
    """
    if not isinstance(form_product, Mapping):
        logger.warning(f"Invalid product data: expected an object, got {type(form_product).__name__}")
        return None

    try:
        checked = ProductCreate.model_validate(dict(form_product))
    except ValidationError as e:
        fields = sorted({".".join(str(part) for part in err["loc"]) for err in e.errors()})
        logger.warning(f"Invalid product data: {', '.join(fields)}")
        return None

    return Product(
        id=0,
        category_id=checked.category_id,
        product_name=escape_html(checked.product_name),
        product_description=escape_html(checked.product_description),
        product_stock=checked.product_stock,
        product_price=checked.product_price,
    )
