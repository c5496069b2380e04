# =============================================================================
# core/services/product_service.py - Product Business Logic
# =============================================================================
# Orchestrates validation and data access for products.
# Separates HTTP concerns from database access.
#
# Invalid input is reported as a plain string result, not an exception:
#   INVALID_PRODUCT_ID, INVALID_PRODUCT_DATA
# =============================================================================

import logging
from typing import Any

from core.validators import validate_id, validate_new_product
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

INVALID_PRODUCT_ID = "Invalid product id"
INVALID_PRODUCT_DATA = "invalid product data"


class ProductService:
    """
    Service for catalog product operations.

    Provides a clean interface between API routes and the data access layer.
    """

    @staticmethod
    def get_products() -> list[dict[str, Any]] | None:
        """Get all products."""
        return SupabaseClient.fetch_products()

    @staticmethod
    def get_product_by_id(product_id: Any) -> dict[str, Any] | str | None:
        """
        Get a single product.

        Args:
            product_id: Raw id as received from the route

        Returns:
            Product dict, None if not found, or INVALID_PRODUCT_ID
        """
        validated_id = validate_id(product_id)

        if not validated_id:
            logger.debug(f"Rejected product id: {product_id!r}")
            return INVALID_PRODUCT_ID

        return SupabaseClient.fetch_product(validated_id)

    @staticmethod
    def get_products_by_cat_id(category_id: Any) -> list[dict[str, Any]] | str | None:
        """
        Get the products in a category.

        Args:
            category_id: Raw category id as received from the route

        Returns:
            List of product dicts, None on storage failure, or INVALID_PRODUCT_ID
        """
        validated_id = validate_id(category_id)

        if not validated_id:
            logger.debug(f"Rejected category id: {category_id!r}")
            return INVALID_PRODUCT_ID

        return SupabaseClient.fetch_products_by_category(validated_id)

    @staticmethod
    def add_new_product(form_product: Any) -> dict[str, Any] | str | None:
        """
        Validate and store a new product.

        Args:
            form_product: Parsed request body

        Returns:
            The created product row, None on storage failure,
            or INVALID_PRODUCT_DATA
        """
        product = validate_new_product(form_product)

        if product is None:
            return INVALID_PRODUCT_DATA

        return SupabaseClient.insert_product(product)
