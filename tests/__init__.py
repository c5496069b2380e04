# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Product Catalog API:
# - test_utils.py: HTML escaping
# - test_models.py: ProductCreate / Product field rules
# - test_validators.py: Id and new-product validation
# - test_supabase_client.py: Data access with an in-memory Supabase stand-in
# - test_product_service.py: Service orchestration and result strings
# - test_products_api.py: Product endpoints through TestClient
# - test_health.py: Root and health endpoints
#
# Run tests with: pytest
# =============================================================================
