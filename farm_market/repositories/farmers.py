from typing import Any, Dict, List, Optional
from sqlalchemy import select, insert, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.models import Farmer
from farm_market.utils.response_helpers import row_to_dict, rows_to_dicts

FARMER_FIELDS = ("full_name", "phone_number", "location", "farm_name")


class FarmerRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_all(self) -> List[Dict[str, Any]]:
        result = await self.db.execute(select(Farmer.__table__))
        return rows_to_dicts(result.mappings().all())

    async def get_by_id(self, farmer_id: int) -> Optional[Dict[str, Any]]:
        result = await self.db.execute(
            select(Farmer.__table__).where(Farmer.farmer_id == farmer_id)
        )
        return row_to_dict(result.mappings().first())

    async def create(self, farmer: Dict[str, Any]) -> int:
        result = await self.db.execute(
            insert(Farmer)
            .values(**{field: farmer.get(field) for field in FARMER_FIELDS})
            .returning(Farmer.farmer_id)
        )
        farmer_id = result.scalar_one()
        await self.db.commit()
        return farmer_id

    async def update(self, farmer_id: int, changes: Dict[str, Any]) -> int:
        values = {k: v for k, v in changes.items() if k in FARMER_FIELDS}
        if not values:
            return 0
        result = await self.db.execute(
            update(Farmer).where(Farmer.farmer_id == farmer_id).values(**values)
        )
        await self.db.commit()
        return result.rowcount

    async def delete(self, farmer_id: int) -> int:
        result = await self.db.execute(
            delete(Farmer).where(Farmer.farmer_id == farmer_id)
        )
        await self.db.commit()
        return result.rowcount
