from typing import Any, Dict, List, Optional
from farm_market.repositories.logistics import LogisticsRepository

REQUIRED_FIELDS = (
    "order_id",
    "vehicle_number_plate",
    "transport_mode",
    "pickup_location",
    "dropoff_location",
)


class LogisticsService:
    def __init__(self, repo: LogisticsRepository) -> None:
        self.repo = repo

    async def get_all_logistics(self) -> List[Dict[str, Any]]:
        return await self.repo.get_all()

    async def get_logistics_by_id(self, logistics_id: int) -> Optional[Dict[str, Any]]:
        return await self.repo.get_by_id(logistics_id)

    async def create_logistics(self, record: Dict[str, Any]) -> Dict[str, Any]:
        if any(not record.get(field) for field in REQUIRED_FIELDS):
            raise ValueError("Missing required logistics fields")
        logistics_id = await self.repo.create(record)
        return {"message": "Logistics record created successfully", "logistics_id": logistics_id}

    async def update_logistics(self, logistics_id: int, changes: Dict[str, Any]) -> Dict[str, str]:
        if not await self.repo.get_by_id(logistics_id):
            raise LookupError("Logistics record not found")
        await self.repo.update(logistics_id, changes)
        return {"message": "Logistics record updated successfully"}

    async def delete_logistics(self, logistics_id: int) -> Dict[str, str]:
        if not await self.repo.get_by_id(logistics_id):
            raise LookupError("Logistics record not found")
        await self.repo.delete(logistics_id)
        return {"message": "Logistics record deleted successfully"}
