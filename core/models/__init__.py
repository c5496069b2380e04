# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - product.py: Product and ProductCreate schemas
#
# These models define the "contract" between API and storage.
# =============================================================================

from .product import Product, ProductCreate

__all__ = [
    "Product",
    "ProductCreate",
]
