from typing import Any, Dict, List, Optional
from farm_market.repositories.products import ProductRepository


def _validate_id(product_id: Any) -> None:
    if not isinstance(product_id, int) or isinstance(product_id, bool) or product_id <= 0:
        raise ValueError(f"Invalid product ID: {product_id}")


class ProductService:
    def __init__(self, repo: ProductRepository) -> None:
        self.repo = repo

    async def add_product(self, product: Dict[str, Any]) -> Dict[str, str]:
        if not product.get("product_name") or product.get("price") is None:
            raise ValueError("Product name and price are required.")
        if product["price"] <= 0:
            raise ValueError("Price must be greater than zero.")
        await self.repo.create(product)
        return {"message": "Product added successfully"}

    async def get_all_products(self) -> List[Dict[str, Any]]:
        return await self.repo.get_all()

    async def get_product_by_id(self, product_id: int) -> Optional[Dict[str, Any]]:
        _validate_id(product_id)
        return await self.repo.get_by_id(product_id)

    async def get_products_by_farmer(self, farmer_id: int) -> List[Dict[str, Any]]:
        return await self.repo.get_by_farmer(farmer_id)

    async def is_owned_by(self, product_id: int, farmer_id: int) -> bool:
        return await self.repo.get_owned(product_id, farmer_id) is not None

    async def update_product(self, product_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, str]]:
        _validate_id(product_id)
        existing = await self.repo.get_by_id(product_id)
        if not existing:
            return None
        if "price" in changes and changes["price"] is not None and changes["price"] <= 0:
            raise ValueError("Price must be greater than zero.")
        await self.repo.update(product_id, changes)
        return {"message": "Product updated successfully"}

    async def delete_product(self, product_id: int) -> Optional[Dict[str, str]]:
        _validate_id(product_id)
        existing = await self.repo.get_by_id(product_id)
        if not existing:
            return None
        await self.repo.delete(product_id)
        return {"message": "Product deleted successfully"}
