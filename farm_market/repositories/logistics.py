from typing import Any, Dict, List, Optional
from sqlalchemy import select, insert, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.models import Logistics, OrderTable
from farm_market.utils.response_helpers import row_to_dict, rows_to_dicts

LOGISTICS_FIELDS = (
    "order_id",
    "vehicle_number_plate",
    "transport_mode",
    "pickup_location",
    "dropoff_location",
    "delivered",
)


class LogisticsRepository:
    """Parameterized queries against the logistics table"""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_all(self) -> List[Dict[str, Any]]:
        result = await self.db.execute(select(Logistics.__table__))
        return rows_to_dicts(result.mappings().all())

    async def get_all_with_order_status(self) -> List[Dict[str, Any]]:
        result = await self.db.execute(
            select(Logistics.__table__, OrderTable.status.label("order_status"))
            .join(OrderTable, Logistics.order_id == OrderTable.order_id)
            .order_by(Logistics.logistics_id.desc())
        )
        return rows_to_dicts(result.mappings().all())

    async def get_by_id(self, logistics_id: int) -> Optional[Dict[str, Any]]:
        result = await self.db.execute(
            select(Logistics.__table__).where(Logistics.logistics_id == logistics_id)
        )
        return row_to_dict(result.mappings().first())

    async def get_by_order(self, order_id: int) -> Optional[Dict[str, Any]]:
        result = await self.db.execute(
            select(Logistics.__table__).where(Logistics.order_id == order_id)
        )
        return row_to_dict(result.mappings().first())

    async def create(self, record: Dict[str, Any]) -> int:
        values = {k: v for k, v in record.items() if k in LOGISTICS_FIELDS}
        values.setdefault("delivered", False)
        result = await self.db.execute(
            insert(Logistics).values(**values).returning(Logistics.logistics_id)
        )
        logistics_id = result.scalar_one()
        await self.db.commit()
        return logistics_id

    async def update(self, logistics_id: int, changes: Dict[str, Any]) -> None:
        values = {k: v for k, v in changes.items() if k in LOGISTICS_FIELDS}
        if not values:
            return
        await self.db.execute(
            update(Logistics)
            .where(Logistics.logistics_id == logistics_id)
            .values(**values)
        )
        await self.db.commit()

    async def delete(self, logistics_id: int) -> None:
        await self.db.execute(
            delete(Logistics).where(Logistics.logistics_id == logistics_id)
        )
        await self.db.commit()
