from typing import Any, Dict, List, Optional
from sqlalchemy import select, insert, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.models import Payment, OrderTable
from farm_market.utils.response_helpers import row_to_dict, rows_to_dicts

UPDATABLE_FIELDS = ("payment_method", "reference", "payment_date", "payment_status")


class PaymentRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_all(self) -> List[Dict[str, Any]]:
        result = await self.db.execute(select(Payment.__table__))
        return rows_to_dicts(result.mappings().all())

    async def get_by_id(self, payment_id: int) -> Optional[Dict[str, Any]]:
        result = await self.db.execute(
            select(Payment.__table__).where(Payment.payment_id == payment_id)
        )
        return row_to_dict(result.mappings().first())

    async def get_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        """Payments recorded against any order placed by the user"""
        result = await self.db.execute(
            select(Payment.__table__)
            .join(OrderTable, Payment.order_id == OrderTable.order_id)
            .where(OrderTable.user_id == user_id)
        )
        return rows_to_dicts(result.mappings().all())

    async def create(self, payment: Dict[str, Any]) -> int:
        result = await self.db.execute(
            insert(Payment)
            .values(
                order_id=payment["order_id"],
                payment_method=payment.get("payment_method"),
                reference=payment.get("reference"),
                payment_date=payment.get("payment_date"),
                payment_status=payment.get("payment_status") or "pending",
            )
            .returning(Payment.payment_id)
        )
        payment_id = result.scalar_one()
        await self.db.commit()
        return payment_id

    async def update(self, payment_id: int, changes: Dict[str, Any]) -> None:
        values = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        if not values:
            return
        await self.db.execute(
            update(Payment)
            .where(Payment.payment_id == payment_id)
            .values(**values)
        )
        await self.db.commit()

    async def delete(self, payment_id: int) -> None:
        await self.db.execute(
            delete(Payment).where(Payment.payment_id == payment_id)
        )
        await self.db.commit()
