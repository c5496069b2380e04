# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .product_service import ProductService, INVALID_PRODUCT_ID, INVALID_PRODUCT_DATA

__all__ = [
    "ProductService",
    "INVALID_PRODUCT_ID",
    "INVALID_PRODUCT_DATA",
]
