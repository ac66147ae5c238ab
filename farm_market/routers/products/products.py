from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.config import get_db
from farm_market.repositories.products import ProductRepository
from farm_market.services.products import ProductService
from farm_market.routers.auth.auth import get_current_user
from farm_market.utils.response_helpers import (
    safe_model_validate,
    safe_model_validate_list,
    parse_id,
)
from .schemas import ProductCreate, ProductUpdate, ProductResponse, ProductMessageResponse
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Products"])


def get_product_service(db: AsyncSession = Depends(get_db)) -> ProductService:
    return ProductService(ProductRepository(db))


def _product_id_or_400(raw_id: str) -> int:
    product_id = parse_id(raw_id)
    if product_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid product ID. Must be a number."
        )
    return product_id


@router.post("", response_model=ProductMessageResponse, status_code=status.HTTP_201_CREATED)
async def add_product(
    product_data: ProductCreate,
    current_user: dict = Depends(get_current_user),
    service: ProductService = Depends(get_product_service)
):
    """
    Add a product listing. Without an explicit farmer_id the listing
    belongs to the caller.
    """
    try:
        payload = product_data.model_dump()
        if payload.get("farmer_id") is None:
            payload["farmer_id"] = current_user["user_id"]
        return ProductMessageResponse(**await service.add_product(payload))

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Error adding product: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.get("", response_model=List[ProductResponse])
async def get_products(
    current_user: dict = Depends(get_current_user),
    service: ProductService = Depends(get_product_service)
):
    try:
        products = await service.get_all_products()
        return safe_model_validate_list(ProductResponse, products)

    except Exception as e:
        logger.error(f"Error fetching products: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    current_user: dict = Depends(get_current_user),
    service: ProductService = Depends(get_product_service)
):
    parsed_id = _product_id_or_400(product_id)
    try:
        product = await service.get_product_by_id(parsed_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found"
            )
        return safe_model_validate(ProductResponse, product)

    except HTTPException:
        raise
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Error fetching product {product_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.put("/{product_id}", response_model=ProductMessageResponse)
async def update_product(
    product_id: str,
    changes: ProductUpdate,
    current_user: dict = Depends(get_current_user),
    service: ProductService = Depends(get_product_service)
):
    parsed_id = _product_id_or_400(product_id)
    try:
        result = await service.update_product(parsed_id, changes.model_dump(exclude_unset=True, exclude_none=True))
        if result is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found"
            )
        return ProductMessageResponse(**result)

    except HTTPException:
        raise
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Error updating product {product_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.delete("/{product_id}", response_model=ProductMessageResponse)
async def delete_product(
    product_id: str,
    current_user: dict = Depends(get_current_user),
    service: ProductService = Depends(get_product_service)
):
    parsed_id = _product_id_or_400(product_id)
    try:
        result = await service.delete_product(parsed_id)
        if result is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found"
            )
        return ProductMessageResponse(**result)

    except HTTPException:
        raise
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Error deleting product {product_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
