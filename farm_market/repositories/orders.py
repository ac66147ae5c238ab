from typing import Any, Dict, List, Optional
from sqlalchemy import select, insert, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.models import OrderTable, Product, UserAccount
from farm_market.utils.response_helpers import row_to_dict, rows_to_dicts

UPDATABLE_FIELDS = ("status", "quantity", "total_amount")


class OrderRepository:
    """Parameterized queries against order_table"""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _with_names(self):
        # Orders joined with the product name and the buyer's name
        return (
            select(
                OrderTable.__table__,
                Product.product_name,
                UserAccount.full_name.label("customer_name"),
            )
            .join(Product, OrderTable.product_id == Product.product_id)
            .join(UserAccount, OrderTable.user_id == UserAccount.user_id)
        )

    async def create(self, order: Dict[str, Any]) -> Dict[str, Any]:
        result = await self.db.execute(
            insert(OrderTable)
            .values(
                user_id=order["user_id"],
                product_id=order["product_id"],
                market_id=order.get("market_id"),
                quantity=order["quantity"],
                total_amount=order["total_amount"],
                order_date=order["order_date"],
                status=order["status"],
            )
            .returning(OrderTable.order_id)
        )
        order_id = result.scalar_one()
        await self.db.commit()
        return {"message": "Order created successfully", "order_id": order_id}

    async def get_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        result = await self.db.execute(
            select(OrderTable.__table__).where(OrderTable.user_id == user_id)
        )
        return rows_to_dicts(result.mappings().all())

    async def get_by_farmer(self, farmer_id: int) -> List[Dict[str, Any]]:
        result = await self.db.execute(
            select(OrderTable.__table__, Product.product_name)
            .join(Product, OrderTable.product_id == Product.product_id)
            .where(Product.farmer_id == farmer_id)
        )
        return rows_to_dicts(result.mappings().all())

    async def get_by_id(self, order_id: int) -> Optional[Dict[str, Any]]:
        result = await self.db.execute(
            select(OrderTable.__table__).where(OrderTable.order_id == order_id)
        )
        return row_to_dict(result.mappings().first())

    async def update(self, order_id: int, changes: Dict[str, Any]) -> Dict[str, Any]:
        values = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        if values:
            await self.db.execute(
                update(OrderTable)
                .where(OrderTable.order_id == order_id)
                .values(**values)
            )
            await self.db.commit()
        return {"message": "Order updated successfully"}

    async def delete(self, order_id: int) -> Dict[str, Any]:
        await self.db.execute(
            delete(OrderTable).where(OrderTable.order_id == order_id)
        )
        await self.db.commit()
        return {"message": "Order deleted successfully"}

    async def get_all_with_details(self) -> List[Dict[str, Any]]:
        result = await self.db.execute(
            self._with_names().order_by(OrderTable.order_date.desc())
        )
        return rows_to_dicts(result.mappings().all())

    async def get_pending_with_details(self) -> List[Dict[str, Any]]:
        result = await self.db.execute(
            self._with_names()
            .where(OrderTable.status == "pending")
            .order_by(OrderTable.order_date.desc())
        )
        return rows_to_dicts(result.mappings().all())

    async def update_status(self, order_id: int, status: str) -> int:
        result = await self.db.execute(
            update(OrderTable)
            .where(OrderTable.order_id == order_id)
            .values(status=status)
        )
        await self.db.commit()
        return result.rowcount
