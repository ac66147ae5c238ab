from typing import Any, Dict, List, Optional
from farm_market.repositories.markets import MarketRepository


class MarketService:
    def __init__(self, repo: MarketRepository) -> None:
        self.repo = repo

    async def fetch_all_markets(self) -> List[Dict[str, Any]]:
        return await self.repo.get_all()

    async def fetch_market_by_id(self, market_id: int) -> Optional[Dict[str, Any]]:
        return await self.repo.get_by_id(market_id)
