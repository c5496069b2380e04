# =============================================================================
# app/routers/products.py - Product Endpoints
# =============================================================================
# HTTP binding for the catalog. Handlers call ProductService and return its
# result as JSON, whatever shape it has (list, object, null or a plain
# message string for invalid input). Any exception becomes a 500 with the
# error message as a plain-text body.
#
# Missing parameters set a 400 status but do not stop the handler: the
# service is still called and its result is returned with that status.
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Response, status
from fastapi.responses import PlainTextResponse

from core.services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/")
async def get_products():
    """
    List all products.

    No filtering or pagination. Returns null if storage could not be read.
    """
    try:
        return ProductService.get_products()
    except Exception as err:
        return PlainTextResponse(str(err), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


# Both bycat routes are declared before /{product_id} so that "bycat" is not
# taken as an id
@router.get("/bycat")
async def get_products_missing_category(response: Response):
    """
    Category route without an id.

    Takes no parameters, so a query string cannot stand in for the path.
    """
    logger.warning("Bad Request - missing cat id")
    response.status_code = status.HTTP_400_BAD_REQUEST

    try:
        return ProductService.get_products_by_cat_id(None)
    except Exception as err:
        return PlainTextResponse(str(err), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/bycat/{cat_id}")
async def get_products_by_category(cat_id: str):
    """
    List the products in a category.

    Example: GET /api/v1/product/bycat/4
    """
    try:
        return ProductService.get_products_by_cat_id(cat_id)
    except Exception as err:
        return PlainTextResponse(str(err), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/{product_id}")
async def get_product(product_id: str):
    """
    Get a single product by id.

    An id that is not a positive integer yields the string "Invalid product id".
    """
    try:
        return ProductService.get_product_by_id(product_id)
    except Exception as err:
        return PlainTextResponse(str(err), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.post("/")
async def add_product(
    response: Response,
    form_product: Annotated[Any, Body()] = None,
):
    """
    Create a product.

    The body is validated by the service; a rejected payload yields the
    string "invalid product data". The id is always assigned by storage.
    """
    if form_product is None:
        logger.warning("Bad Request - missing product data")
        response.status_code = status.HTTP_400_BAD_REQUEST

    try:
        return ProductService.add_new_product(form_product)
    except Exception as err:
        return PlainTextResponse(str(err), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
