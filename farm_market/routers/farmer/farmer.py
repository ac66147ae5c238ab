from fastapi import APIRouter, Depends, HTTPException, status
from farm_market.dependencies.rbac import require_farmer
from farm_market.services.products import ProductService
from farm_market.services.orders import OrderService
from farm_market.routers.products.products import get_product_service
from farm_market.routers.products.schemas import (
    FarmerProductCreate,
    ProductResponse,
    ProductMessageResponse,
)
from farm_market.routers.orders.orders import get_order_service
from farm_market.routers.orders.schemas import OrderWithDetailsResponse
from farm_market.utils.response_helpers import safe_model_validate_list
from typing import Any, Dict, List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Farmer"])


def _to_product_fields(product_data: FarmerProductCreate) -> Dict[str, Any]:
    """Map the dashboard's field names onto product columns"""
    provided = product_data.model_dump(exclude_unset=True, exclude_none=True)
    renames = {"name": "product_name", "quantity": "stock_quantity"}
    return {renames.get(key, key): value for key, value in provided.items()}


@router.get("/products/mine", response_model=List[ProductResponse])
async def get_my_products(
    current_user: dict = Depends(require_farmer),
    service: ProductService = Depends(get_product_service)
):
    try:
        products = await service.get_products_by_farmer(current_user["user_id"])
        return safe_model_validate_list(ProductResponse, products)

    except Exception as e:
        logger.error(f"Error fetching products for farmer {current_user['user_id']}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.post("/products", response_model=ProductMessageResponse, status_code=status.HTTP_201_CREATED)
async def add_my_product(
    product_data: FarmerProductCreate,
    current_user: dict = Depends(require_farmer),
    service: ProductService = Depends(get_product_service)
):
    try:
        if not product_data.name or not product_data.price or not product_data.quantity:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Name, price, and quantity are required"
            )

        payload = _to_product_fields(product_data)
        payload["farmer_id"] = current_user["user_id"]
        result = await service.add_product(payload)
        logger.info(f"Farmer {current_user['user_id']} listed product {product_data.name}")
        return ProductMessageResponse(**result)

    except HTTPException:
        raise
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Error adding product for farmer {current_user['user_id']}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.put("/products/{product_id}", response_model=ProductMessageResponse)
async def update_my_product(
    product_id: int,
    product_data: FarmerProductCreate,
    current_user: dict = Depends(require_farmer),
    service: ProductService = Depends(get_product_service)
):
    try:
        if not await service.is_owned_by(product_id, current_user["user_id"]):
            logger.warning(f"Farmer {current_user['user_id']} tried to edit product {product_id}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You can only edit your own products"
            )

        result = await service.update_product(product_id, _to_product_fields(product_data))
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


@router.delete("/products/{product_id}", response_model=ProductMessageResponse)
async def delete_my_product(
    product_id: int,
    current_user: dict = Depends(require_farmer),
    service: ProductService = Depends(get_product_service)
):
    try:
        if not await service.is_owned_by(product_id, current_user["user_id"]):
            logger.warning(f"Farmer {current_user['user_id']} tried to delete product {product_id}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You can only delete your own products"
            )

        result = await service.delete_product(product_id)
        if result is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found"
            )
        return ProductMessageResponse(**result)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting product {product_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.get("/orders", response_model=List[OrderWithDetailsResponse])
async def get_orders_for_my_products(
    current_user: dict = Depends(require_farmer),
    service: OrderService = Depends(get_order_service)
):
    """Orders placed against any of the caller's products"""
    try:
        orders = await service.get_orders_by_farmer(current_user["user_id"])
        return safe_model_validate_list(OrderWithDetailsResponse, orders)

    except Exception as e:
        logger.error(f"Error fetching orders for farmer {current_user['user_id']}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
