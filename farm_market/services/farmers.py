from typing import Any, Dict, List, Optional
from farm_market.repositories.farmers import FarmerRepository


class FarmerService:
    def __init__(self, repo: FarmerRepository) -> None:
        self.repo = repo

    async def get_all_farmers(self) -> List[Dict[str, Any]]:
        return await self.repo.get_all()

    async def get_farmer_by_id(self, farmer_id: int) -> Optional[Dict[str, Any]]:
        return await self.repo.get_by_id(farmer_id)

    async def add_farmer(self, farmer: Dict[str, Any]) -> Dict[str, Any]:
        if not farmer.get("full_name"):
            raise ValueError("Farmer full name is required")
        farmer_id = await self.repo.create(farmer)
        return {"message": "Farmer added successfully", "farmer_id": farmer_id}

    async def update_farmer(self, farmer_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, str]]:
        if not await self.repo.get_by_id(farmer_id):
            return None
        await self.repo.update(farmer_id, changes)
        return {"message": "Farmer updated successfully"}

    async def delete_farmer(self, farmer_id: int) -> Optional[Dict[str, str]]:
        if not await self.repo.get_by_id(farmer_id):
            return None
        await self.repo.delete(farmer_id)
        return {"message": "Farmer deleted successfully"}
