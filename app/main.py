# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Product Catalog API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.config import settings
from app.exceptions import (
    internal_exception_handler,
    validation_exception_handler,
)
from app.routers import health, products

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The Supabase client is created lazily on the first query, so there is
    nothing to open here beyond logging the configuration.
    """
    logger.info(f"Starting Product Catalog API in {settings.ENVIRONMENT} mode")
    logger.info(f"Product table: {settings.PRODUCT_TABLE}")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down Product Catalog API")


# Create FastAPI application
app = FastAPI(
    title="Product Catalog API",
    description="""
## Product Catalog API

Read and create catalog products stored in a relational database.

### Layers

| Layer | Module |
|-------|--------|
| **Controller** | `app/routers/products.py` |
| **Service** | `core/services/product_service.py` |
| **Data access** | `lib/supabase_client.py` |

### Quick Start

```bash
# List products
curl http://localhost:8000/api/v1/product/

# Products in category 4
curl http://localhost:8000/api/v1/product/bycat/4

# Create a product
curl -X POST http://localhost:8000/api/v1/product/ \\
  -H "Content-Type: application/json" \\
  -d '{"category_id": 1, "product_name": "Widget", "product_description": "A widget", "product_stock": 10, "product_price": "9.99"}'
```
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Products",
            "description": "List, fetch and create catalog products",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed requests."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await internal_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Product catalog endpoints
app.include_router(
    products.router,
    prefix="/api/v1/product",
    tags=["Products"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Product Catalog API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
