from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.config import get_db
from farm_market.repositories.farmers import FarmerRepository
from farm_market.services.farmers import FarmerService
from farm_market.routers.auth.auth import get_current_user
from farm_market.dependencies.rbac import require_admin
from farm_market.utils.response_helpers import safe_model_validate, safe_model_validate_list
from .schemas import (
    FarmerCreate,
    FarmerUpdate,
    FarmerResponse,
    FarmerCreatedResponse,
    FarmerMessageResponse,
)
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Farmers"])


def get_farmer_service(db: AsyncSession = Depends(get_db)) -> FarmerService:
    return FarmerService(FarmerRepository(db))


@router.get("", response_model=List[FarmerResponse])
async def get_farmers(
    current_user: dict = Depends(get_current_user),
    service: FarmerService = Depends(get_farmer_service)
):
    try:
        farmers = await service.get_all_farmers()
        return safe_model_validate_list(FarmerResponse, farmers)

    except Exception as e:
        logger.error(f"Error fetching farmers: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.get("/{farmer_id}", response_model=FarmerResponse)
async def get_farmer(
    farmer_id: int,
    current_user: dict = Depends(get_current_user),
    service: FarmerService = Depends(get_farmer_service)
):
    try:
        farmer = await service.get_farmer_by_id(farmer_id)
        if not farmer:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Farmer not found"
            )
        return safe_model_validate(FarmerResponse, farmer)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching farmer {farmer_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.post("", response_model=FarmerCreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_farmer(
    farmer_data: FarmerCreate,
    current_user: dict = Depends(require_admin),
    service: FarmerService = Depends(get_farmer_service)
):
    try:
        result = await service.add_farmer(farmer_data.model_dump())
        return FarmerCreatedResponse(**result)

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Error adding farmer: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.put("/{farmer_id}", response_model=FarmerMessageResponse)
async def update_farmer(
    farmer_id: int,
    changes: FarmerUpdate,
    current_user: dict = Depends(require_admin),
    service: FarmerService = Depends(get_farmer_service)
):
    try:
        result = await service.update_farmer(farmer_id, changes.model_dump(exclude_unset=True, exclude_none=True))
        if result is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Farmer not found"
            )
        return FarmerMessageResponse(**result)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating farmer {farmer_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.delete("/{farmer_id}", response_model=FarmerMessageResponse)
async def delete_farmer(
    farmer_id: int,
    current_user: dict = Depends(require_admin),
    service: FarmerService = Depends(get_farmer_service)
):
    try:
        result = await service.delete_farmer(farmer_id)
        if result is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Farmer not found"
            )
        return FarmerMessageResponse(**result)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting farmer {farmer_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
