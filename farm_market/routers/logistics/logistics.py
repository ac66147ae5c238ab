from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.config import get_db
from farm_market.repositories.logistics import LogisticsRepository
from farm_market.services.logistics import LogisticsService
from farm_market.dependencies.rbac import require_admin
from farm_market.utils.response_helpers import safe_model_validate, safe_model_validate_list
from .schemas import (
    LogisticsCreate,
    LogisticsUpdate,
    LogisticsResponse,
    LogisticsCreatedResponse,
    LogisticsMessageResponse,
)
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Logistics"])


def get_logistics_service(db: AsyncSession = Depends(get_db)) -> LogisticsService:
    return LogisticsService(LogisticsRepository(db))


@router.get("", response_model=List[LogisticsResponse])
async def get_logistics(
    current_user: dict = Depends(require_admin),
    service: LogisticsService = Depends(get_logistics_service)
):
    try:
        records = await service.get_all_logistics()
        return safe_model_validate_list(LogisticsResponse, records)

    except Exception as e:
        logger.error(f"Error fetching logistics: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.get("/{logistics_id}", response_model=LogisticsResponse)
async def get_logistics_record(
    logistics_id: int,
    current_user: dict = Depends(require_admin),
    service: LogisticsService = Depends(get_logistics_service)
):
    try:
        record = await service.get_logistics_by_id(logistics_id)
        if not record:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Logistics record not found"
            )
        return safe_model_validate(LogisticsResponse, record)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching logistics {logistics_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.post("", response_model=LogisticsCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_logistics(
    record: LogisticsCreate,
    current_user: dict = Depends(require_admin),
    service: LogisticsService = Depends(get_logistics_service)
):
    try:
        result = await service.create_logistics(record.model_dump())
        logger.info(f"Logistics {result['logistics_id']} created for order {record.order_id}")
        return LogisticsCreatedResponse(**result)

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Error creating logistics: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.put("/{logistics_id}", response_model=LogisticsMessageResponse)
async def update_logistics(
    logistics_id: int,
    changes: LogisticsUpdate,
    current_user: dict = Depends(require_admin),
    service: LogisticsService = Depends(get_logistics_service)
):
    try:
        result = await service.update_logistics(logistics_id, changes.model_dump(exclude_unset=True, exclude_none=True))
        return LogisticsMessageResponse(**result)

    except LookupError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Error updating logistics {logistics_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.delete("/{logistics_id}", response_model=LogisticsMessageResponse)
async def delete_logistics(
    logistics_id: int,
    current_user: dict = Depends(require_admin),
    service: LogisticsService = Depends(get_logistics_service)
):
    try:
        result = await service.delete_logistics(logistics_id)
        return LogisticsMessageResponse(**result)

    except LookupError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Error deleting logistics {logistics_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
