from typing import Any, Dict, List, Optional
from sqlalchemy import select, insert, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.models import Product
from farm_market.utils.response_helpers import row_to_dict, rows_to_dicts

UPDATABLE_FIELDS = ("product_name", "category", "stock_quantity", "price", "description")


class ProductRepository:
    """Parameterized queries against the product table"""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_all(self) -> List[Dict[str, Any]]:
        result = await self.db.execute(select(Product.__table__))
        return rows_to_dicts(result.mappings().all())

    async def get_by_id(self, product_id: int) -> Optional[Dict[str, Any]]:
        if not isinstance(product_id, int) or isinstance(product_id, bool):
            raise ValueError(f"Invalid product ID: {product_id}")
        result = await self.db.execute(
            select(Product.__table__).where(Product.product_id == product_id)
        )
        return row_to_dict(result.mappings().first())

    async def get_by_farmer(self, farmer_id: int) -> List[Dict[str, Any]]:
        result = await self.db.execute(
            select(Product.__table__).where(Product.farmer_id == farmer_id)
        )
        return rows_to_dicts(result.mappings().all())

    async def get_owned(self, product_id: int, farmer_id: int) -> Optional[Dict[str, Any]]:
        """The product only if it belongs to the given farmer"""
        result = await self.db.execute(
            select(Product.__table__).where(
                Product.product_id == product_id,
                Product.farmer_id == farmer_id,
            )
        )
        return row_to_dict(result.mappings().first())

    async def create(self, product: Dict[str, Any]) -> Dict[str, Any]:
        result = await self.db.execute(
            insert(Product)
            .values(
                farmer_id=product["farmer_id"],
                product_name=product["product_name"],
                category=product.get("category"),
                stock_quantity=product.get("stock_quantity") or 0,
                price=product["price"],
                description=product.get("description") or "",
            )
            .returning(*Product.__table__.columns)
        )
        created = row_to_dict(result.mappings().first())
        await self.db.commit()
        return created

    async def update(self, product_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        values = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        if not values:
            return await self.get_by_id(product_id)

        result = await self.db.execute(
            update(Product)
            .where(Product.product_id == product_id)
            .values(**values)
            .returning(*Product.__table__.columns)
        )
        updated = row_to_dict(result.mappings().first())
        await self.db.commit()
        return updated

    async def delete(self, product_id: int) -> bool:
        result = await self.db.execute(
            delete(Product).where(Product.product_id == product_id)
        )
        await self.db.commit()
        return result.rowcount > 0
