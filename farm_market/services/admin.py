from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
import logging
from farm_market.repositories.orders import OrderRepository
from farm_market.repositories.payments import PaymentRepository
from farm_market.repositories.logistics import LogisticsRepository
from farm_market.repositories.users import UserRepository

logger = logging.getLogger(__name__)

PAID_STATUS = "Paid"
SHIPPED_STATUS = "Shipped"


class AdminService:
    """
    Admin order handling. The approve-payment and assign-driver workflows
    run two statements back to back, each committed on its own; a failure
    after the first leaves it applied.
    """

    def __init__(
        self,
        orders: OrderRepository,
        payments: PaymentRepository,
        logistics: LogisticsRepository,
        users: UserRepository,
    ) -> None:
        self.orders = orders
        self.payments = payments
        self.logistics = logistics
        self.users = users

    async def get_all_orders(self) -> List[Dict[str, Any]]:
        return await self.orders.get_all_with_details()

    async def get_pending_orders(self) -> List[Dict[str, Any]]:
        return await self.orders.get_pending_with_details()

    async def update_order_status(self, order_id: int, status: str) -> None:
        await self.orders.update_status(order_id, status)
        logger.info(f"Order {order_id} status set to {status}")

    async def approve_payment(self, order_id: int) -> int:
        await self.orders.update_status(order_id, PAID_STATUS)
        payment_id = await self.payments.create({
            "order_id": order_id,
            "payment_method": "Admin Approved",
            "reference": "",
            "payment_date": datetime.now(timezone.utc),
            "payment_status": "completed",
        })
        logger.info(f"Payment {payment_id} approved for order {order_id}")
        return payment_id

    async def assign_driver(self, order_id: int, assignment: Dict[str, Any]) -> int:
        logistics_id = await self.logistics.create({
            "order_id": order_id,
            "vehicle_number_plate": assignment["vehicle_number_plate"],
            "transport_mode": assignment["transport_mode"],
            "pickup_location": assignment["pickup_location"],
            "dropoff_location": assignment["dropoff_location"],
            "delivered": False,
        })
        await self.orders.update_status(order_id, SHIPPED_STATUS)
        logger.info(f"Logistics {logistics_id} assigned to order {order_id}")
        return logistics_id

    async def get_logistics_by_order(self, order_id: int) -> Optional[Dict[str, Any]]:
        return await self.logistics.get_by_order(order_id)

    async def get_all_logistics(self) -> List[Dict[str, Any]]:
        return await self.logistics.get_all_with_order_status()

    async def get_all_drivers(self) -> List[Dict[str, Any]]:
        return await self.users.get_by_role("driver")
