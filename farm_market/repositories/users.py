from typing import Any, Dict, List, Optional
from sqlalchemy import select, insert
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.models import UserAccount
from farm_market.utils.response_helpers import row_to_dict, rows_to_dicts

# Columns safe to hand back to API callers
PUBLIC_COLUMNS = (
    UserAccount.user_id,
    UserAccount.full_name,
    UserAccount.email,
    UserAccount.phone,
    UserAccount.role,
    UserAccount.created_at,
)


class UserRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Full account row, password hash included, for login checks"""
        result = await self.db.execute(
            select(UserAccount.__table__).where(UserAccount.email == email)
        )
        return row_to_dict(result.mappings().first())

    async def create(self, user: Dict[str, Any]) -> int:
        result = await self.db.execute(
            insert(UserAccount)
            .values(
                full_name=user["full_name"],
                email=user["email"],
                phone=user.get("phone"),
                role=user["role"],
                password_hash=user["password_hash"],
            )
            .returning(UserAccount.user_id)
        )
        user_id = result.scalar_one()
        await self.db.commit()
        return user_id

    async def get_by_role(self, role: str) -> List[Dict[str, Any]]:
        result = await self.db.execute(
            select(*PUBLIC_COLUMNS).where(UserAccount.role == role)
        )
        return rows_to_dicts(result.mappings().all())
