from pydantic import BaseModel
from typing import Optional


class MarketResponse(BaseModel):
    market_id: int
    market_name: str
    location: Optional[str] = None
