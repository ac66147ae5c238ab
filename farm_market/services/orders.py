from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
from farm_market.repositories.orders import OrderRepository


class OrderService:
    def __init__(self, repo: OrderRepository) -> None:
        self.repo = repo

    async def create_order(self, order: Dict[str, Any]) -> Dict[str, Any]:
        order = dict(order)
        if order.get("order_date") is None:
            order["order_date"] = datetime.now(timezone.utc)
        if not order.get("status"):
            order["status"] = "pending"
        return await self.repo.create(order)

    async def get_orders(self, user_id: int) -> List[Dict[str, Any]]:
        return await self.repo.get_by_user(user_id)

    async def get_orders_by_farmer(self, farmer_id: int) -> List[Dict[str, Any]]:
        return await self.repo.get_by_farmer(farmer_id)

    async def get_order_by_id(self, order_id: int) -> Optional[Dict[str, Any]]:
        return await self.repo.get_by_id(order_id)

    async def update_order(self, order_id: int, changes: Dict[str, Any]) -> Dict[str, Any]:
        return await self.repo.update(order_id, changes)

    async def delete_order(self, order_id: int) -> Dict[str, Any]:
        return await self.repo.delete(order_id)
