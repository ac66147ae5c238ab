from typing import Any, Dict, List, Optional
from farm_market.repositories.payments import PaymentRepository


class PaymentService:
    def __init__(self, repo: PaymentRepository) -> None:
        self.repo = repo

    async def get_all(self) -> List[Dict[str, Any]]:
        return await self.repo.get_all()

    async def get_by_id(self, payment_id: int) -> Optional[Dict[str, Any]]:
        return await self.repo.get_by_id(payment_id)

    async def get_by_user_id(self, user_id: int) -> List[Dict[str, Any]]:
        return await self.repo.get_by_user(user_id)

    async def create(self, payment: Dict[str, Any]) -> int:
        return await self.repo.create(payment)

    async def update(self, payment_id: int, changes: Dict[str, Any]) -> None:
        await self.repo.update(payment_id, changes)

    async def delete(self, payment_id: int) -> None:
        await self.repo.delete(payment_id)
