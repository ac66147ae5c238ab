from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.config import get_db
from farm_market.repositories.payments import PaymentRepository
from farm_market.services.payments import PaymentService
from farm_market.routers.auth.auth import get_current_user
from farm_market.utils.response_helpers import safe_model_validate, safe_model_validate_list
from .schemas import PaymentCreate, PaymentUpdate, PaymentResponse, PaymentMessageResponse
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Payments"])


def get_payment_service(db: AsyncSession = Depends(get_db)) -> PaymentService:
    return PaymentService(PaymentRepository(db))


@router.get("", response_model=List[PaymentResponse])
async def get_payments(
    current_user: dict = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service)
):
    try:
        payments = await service.get_all()
        return safe_model_validate_list(PaymentResponse, payments)

    except Exception as e:
        logger.error(f"Error fetching payments: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.get("/user", response_model=List[PaymentResponse])
async def get_my_payments(
    current_user: dict = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service)
):
    """Payments recorded against the caller's orders"""
    try:
        user_id = current_user.get("user_id")
        if not user_id:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User not authenticated"
            )

        payments = await service.get_by_user_id(user_id)
        return safe_model_validate_list(PaymentResponse, payments)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching payments for user {current_user.get('user_id')}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(
    payment_id: int,
    current_user: dict = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service)
):
    try:
        payment = await service.get_by_id(payment_id)
        if not payment:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Payment not found"
            )
        return safe_model_validate(PaymentResponse, payment)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching payment {payment_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.post("", response_model=PaymentMessageResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payment_data: PaymentCreate,
    current_user: dict = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service)
):
    try:
        payment_id = await service.create(payment_data.model_dump())
        logger.info(f"Payment {payment_id} recorded for order {payment_data.order_id}")
        return PaymentMessageResponse(message="Payment created")

    except Exception as e:
        logger.error(f"Error creating payment: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.put("/{payment_id}", response_model=PaymentMessageResponse)
async def update_payment(
    payment_id: int,
    changes: PaymentUpdate,
    current_user: dict = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service)
):
    try:
        await service.update(payment_id, changes.model_dump(exclude_unset=True, exclude_none=True))
        return PaymentMessageResponse(message="Payment updated")

    except Exception as e:
        logger.error(f"Error updating payment {payment_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.delete("/{payment_id}", response_model=PaymentMessageResponse)
async def delete_payment(
    payment_id: int,
    current_user: dict = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service)
):
    try:
        await service.delete(payment_id)
        return PaymentMessageResponse(message="Payment deleted")

    except Exception as e:
        logger.error(f"Error deleting payment {payment_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
