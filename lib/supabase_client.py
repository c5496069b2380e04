# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper (Product Data Access)
# =============================================================================
# This module is the data access layer for the catalog. It owns the single
# process-wide Supabase client and translates the logical product queries
# into PostgREST calls against the product table:
# - all products
# - one product by id
# - products in a category
# - insert a new product
#
# Storage errors never leave this module: they are logged and the method
# returns None. Callers cannot tell "not found" from "storage failure".
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   products = SupabaseClient.fetch_products()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, TYPE_CHECKING

from supabase import create_client, Client

from app.config import settings

if TYPE_CHECKING:
    from core.models.product import Product

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Provides actionable error messages:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


def _error_message(error: Exception) -> str:
    """Message text of an exception, without the traceback."""
    return getattr(error, "message", None) or str(error)


class SupabaseClient:
    """
    Typed wrapper for product storage operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        products = SupabaseClient.fetch_products_by_category(4)
        product = SupabaseClient.fetch_product(12)
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def _products(cls):
        """Query builder for the product table."""
        return cls.get_client().table(settings.PRODUCT_TABLE)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_products(cls) -> list[dict[str, Any]] | None:
        """
        Fetch every row of the product table.

        No filtering, no pagination.

        Returns:
            List of product dicts, or None if the query failed
        """
        try:
            response = cls._products().select("*").execute()
            products = response.data or []
            logger.debug(f"Fetched {len(products)} products")
            return products

        except Exception as e:
            logger.error(f"DB Error - get all products: {_error_message(e)}")
            return None

    @classmethod
    def fetch_product(cls, product_id: int) -> dict[str, Any] | None:
        """
        Fetch a single product by ID.

        Args:
            product_id: The product's integer primary key

        Returns:
            Product dict, or None if not found or the query failed
        """
        try:
            response = (
                cls._products()
                .select("*")
                .eq("id", product_id)
                .limit(1)
                .execute()
            )
            rows = response.data or []
            return rows[0] if rows else None

        except Exception as e:
            logger.error(f"DB Error - get product by id: {_error_message(e)}")
            return None

    @classmethod
    def fetch_products_by_category(cls, category_id: int) -> list[dict[str, Any]] | None:
        """
        Fetch all products in a category.

        Args:
            category_id: Value matched against product.category_id

        Returns:
            List of product dicts (possibly empty), or None if the query failed
        """
        try:
            response = (
                cls._products()
                .select("*")
                .eq("category_id", category_id)
                .execute()
            )
            products = response.data or []
            logger.debug(f"Fetched {len(products)} products for category {category_id}")
            return products

        except Exception as e:
            logger.error(f"DB Error - get products by category: {_error_message(e)}")
            return None

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    @classmethod
    def insert_product(cls, product: Product) -> dict[str, Any] | None:
        """
        Insert a validated product.

        The id is never sent; storage assigns it.

        Args:
            product: Validated Product (id=0)

        Returns:
            The stored row including its new id, or None if the insert failed
        """
        data = product.model_dump(exclude={"id"})

        try:
            response = cls._products().insert(data).execute()
        except Exception as e:
            logger.error(f"DB Error - create product: {_error_message(e)}")
            return None

        if not response.data:
            logger.error("DB Error - create product: Insert returned no data")
            return None

        created = response.data[0]
        logger.info(f"Created product: {created.get('id')}")
        return created
