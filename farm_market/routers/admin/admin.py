from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.config import get_db
from farm_market.dependencies.rbac import require_admin
from farm_market.repositories import (
    OrderRepository,
    PaymentRepository,
    LogisticsRepository,
    UserRepository,
)
from farm_market.services.admin import AdminService
from farm_market.routers.orders.schemas import OrderWithDetailsResponse
from farm_market.routers.logistics.schemas import LogisticsResponse, LogisticsWithStatusResponse
from farm_market.utils.response_helpers import safe_model_validate, safe_model_validate_list
from .schemas import OrderStatusUpdate, DriverAssignment, DriverResponse, AdminMessageResponse
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Admin"])


def get_admin_service(db: AsyncSession = Depends(get_db)) -> AdminService:
    return AdminService(
        orders=OrderRepository(db),
        payments=PaymentRepository(db),
        logistics=LogisticsRepository(db),
        users=UserRepository(db),
    )


@router.get("/orders", response_model=List[OrderWithDetailsResponse])
async def get_all_orders(
    current_user: dict = Depends(require_admin),
    service: AdminService = Depends(get_admin_service)
):
    """
    Admin only: every order with its product and customer names, newest first
    """
    try:
        orders = await service.get_all_orders()
        return safe_model_validate_list(OrderWithDetailsResponse, orders)

    except Exception as e:
        logger.error(f"Error fetching orders: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch orders: {str(e)}"
        )


@router.get("/orders/pending", response_model=List[OrderWithDetailsResponse])
async def get_pending_orders(
    current_user: dict = Depends(require_admin),
    service: AdminService = Depends(get_admin_service)
):
    try:
        orders = await service.get_pending_orders()
        return safe_model_validate_list(OrderWithDetailsResponse, orders)

    except Exception as e:
        logger.error(f"Error fetching pending orders: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch pending orders: {str(e)}"
        )


@router.patch("/orders/{order_id}/status", response_model=AdminMessageResponse)
async def update_order_status(
    order_id: int,
    status_data: OrderStatusUpdate,
    current_user: dict = Depends(require_admin),
    service: AdminService = Depends(get_admin_service)
):
    try:
        await service.update_order_status(order_id, status_data.status)
        return AdminMessageResponse(message="Order status updated successfully")

    except Exception as e:
        logger.error(f"Error updating status of order {order_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update order status: {str(e)}"
        )


@router.post("/orders/{order_id}/approve-payment", response_model=AdminMessageResponse)
async def approve_payment(
    order_id: int,
    current_user: dict = Depends(require_admin),
    service: AdminService = Depends(get_admin_service)
):
    """
    Admin only: mark the order Paid and record an admin-approved payment.
    The two writes are committed separately.
    """
    try:
        await service.approve_payment(order_id)
        logger.info(f"Admin {current_user['user_id']} approved payment for order {order_id}")
        return AdminMessageResponse(message="Payment approved successfully")

    except Exception as e:
        logger.error(f"Error approving payment for order {order_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to approve payment: {str(e)}"
        )


@router.post("/orders/{order_id}/assign-driver", response_model=AdminMessageResponse)
async def assign_driver(
    order_id: int,
    assignment: DriverAssignment,
    current_user: dict = Depends(require_admin),
    service: AdminService = Depends(get_admin_service)
):
    """
    Admin only: create the delivery record and mark the order Shipped.
    The two writes are committed separately.
    """
    try:
        await service.assign_driver(order_id, assignment.model_dump())
        logger.info(f"Admin {current_user['user_id']} assigned a driver to order {order_id}")
        return AdminMessageResponse(message="Driver assigned successfully")

    except Exception as e:
        logger.error(f"Error assigning driver to order {order_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to assign driver: {str(e)}"
        )


@router.get("/orders/{order_id}/logistics", response_model=LogisticsResponse)
async def get_order_logistics(
    order_id: int,
    current_user: dict = Depends(require_admin),
    service: AdminService = Depends(get_admin_service)
):
    try:
        record = await service.get_logistics_by_order(order_id)
        if not record:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Logistics not found"
            )
        return safe_model_validate(LogisticsResponse, record)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching logistics for order {order_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch logistics: {str(e)}"
        )


@router.get("/logistics", response_model=List[LogisticsWithStatusResponse])
async def get_all_logistics(
    current_user: dict = Depends(require_admin),
    service: AdminService = Depends(get_admin_service)
):
    try:
        records = await service.get_all_logistics()
        return safe_model_validate_list(LogisticsWithStatusResponse, records)

    except Exception as e:
        logger.error(f"Error fetching logistics: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch logistics: {str(e)}"
        )


@router.get("/drivers", response_model=List[DriverResponse])
async def get_drivers(
    current_user: dict = Depends(require_admin),
    service: AdminService = Depends(get_admin_service)
):
    try:
        drivers = await service.get_all_drivers()
        return safe_model_validate_list(DriverResponse, drivers)

    except Exception as e:
        logger.error(f"Error fetching drivers: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch drivers: {str(e)}"
        )
