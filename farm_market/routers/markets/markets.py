from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.config import get_db
from farm_market.repositories.markets import MarketRepository
from farm_market.services.markets import MarketService
from farm_market.routers.auth.auth import is_authenticated
from farm_market.utils.response_helpers import safe_model_validate, safe_model_validate_list
from .schemas import MarketResponse
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Markets"])


def get_market_service(db: AsyncSession = Depends(get_db)) -> MarketService:
    return MarketService(MarketRepository(db))


@router.get("", response_model=List[MarketResponse])
async def get_markets(
    current_user: dict = Depends(is_authenticated),
    service: MarketService = Depends(get_market_service)
):
    try:
        markets = await service.fetch_all_markets()
        return safe_model_validate_list(MarketResponse, markets)

    except Exception as e:
        logger.error(f"Error fetching markets: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.get("/{market_id}", response_model=MarketResponse)
async def get_market(
    market_id: int,
    current_user: dict = Depends(is_authenticated),
    service: MarketService = Depends(get_market_service)
):
    try:
        market = await service.fetch_market_by_id(market_id)
        if not market:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Market not found"
            )
        return safe_model_validate(MarketResponse, market)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching market {market_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
