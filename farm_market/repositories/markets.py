from typing import Any, Dict, List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.models import Market
from farm_market.utils.response_helpers import row_to_dict, rows_to_dicts


class MarketRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_all(self) -> List[Dict[str, Any]]:
        result = await self.db.execute(select(Market.__table__))
        return rows_to_dicts(result.mappings().all())

    async def get_by_id(self, market_id: int) -> Optional[Dict[str, Any]]:
        result = await self.db.execute(
            select(Market.__table__).where(Market.market_id == market_id)
        )
        return row_to_dict(result.mappings().first())
