from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.config import get_db
from farm_market.repositories.orders import OrderRepository
from farm_market.services.orders import OrderService
from farm_market.routers.auth.auth import get_current_user
from farm_market.utils.response_helpers import safe_model_validate, safe_model_validate_list
from .schemas import (
    OrderCreate,
    OrderUpdate,
    OrderResponse,
    OrderCreatedResponse,
    OrderMessageResponse,
)
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Orders"])


def get_order_service(db: AsyncSession = Depends(get_db)) -> OrderService:
    return OrderService(OrderRepository(db))


@router.post("", response_model=OrderCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    order_data: OrderCreate,
    current_user: dict = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    """
    Place an order. The buyer defaults to the authenticated caller.
    """
    try:
        payload = order_data.model_dump()
        if payload.get("user_id") is None:
            payload["user_id"] = current_user["user_id"]

        result = await service.create_order(payload)
        logger.info(f"Order {result['order_id']} created by user {current_user['user_id']}")
        return OrderCreatedResponse(**result)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating order: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create order: {str(e)}"
        )


@router.get("", response_model=List[OrderResponse])
async def get_my_orders(
    current_user: dict = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    try:
        user_id = current_user.get("user_id")
        if not user_id:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User not authenticated"
            )

        orders = await service.get_orders(user_id)
        return safe_model_validate_list(OrderResponse, orders)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching orders: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch orders: {str(e)}"
        )


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: int,
    current_user: dict = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    try:
        order = await service.get_order_by_id(order_id)
        if not order:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Order not found"
            )
        return safe_model_validate(OrderResponse, order)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching order {order_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch order: {str(e)}"
        )


@router.put("/{order_id}", response_model=OrderMessageResponse)
async def update_order(
    order_id: int,
    changes: OrderUpdate,
    current_user: dict = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    try:
        result = await service.update_order(order_id, changes.model_dump(exclude_unset=True, exclude_none=True))
        return OrderMessageResponse(**result)

    except Exception as e:
        logger.error(f"Error updating order {order_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update order: {str(e)}"
        )


@router.delete("/{order_id}", response_model=OrderMessageResponse)
async def delete_order(
    order_id: int,
    current_user: dict = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    try:
        result = await service.delete_order(order_id)
        return OrderMessageResponse(**result)

    except Exception as e:
        logger.error(f"Error deleting order {order_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete order: {str(e)}"
        )
