from typing import Any, Dict, Optional
import logging
from farm_market.repositories.users import UserRepository
from farm_market.routers.auth.helpers import auth_helpers

logger = logging.getLogger(__name__)


class EmailAlreadyRegisteredError(Exception):
    """Raised when registering an email that already has an account."""


class UserNotFoundError(Exception):
    """Raised when logging in with an unknown email."""


class InvalidCredentialsError(Exception):
    """Raised when the password does not match the stored hash."""


class AuthService:
    """Registration and login on top of the user_account table"""

    def __init__(self, repo: UserRepository) -> None:
        self.repo = repo

    async def register(self, user: Dict[str, Any]) -> int:
        existing = await self.repo.get_by_email(user["email"])
        if existing:
            raise EmailAlreadyRegisteredError("Email is already registered")

        user_id = await self.repo.create({
            "full_name": user["full_name"],
            "email": user["email"],
            "phone": user.get("phone"),
            "role": user["role"],
            "password_hash": auth_helpers.hash_password(user["password"]),
        })
        logger.info(f"Registered user {user_id} with role {user['role']}")
        return user_id

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        account: Optional[Dict[str, Any]] = await self.repo.get_by_email(email)
        if not account:
            raise UserNotFoundError("User not found")

        if not auth_helpers.verify_password(password, account["password_hash"]):
            raise InvalidCredentialsError("Invalid credentials")

        token = auth_helpers.create_access_token(
            user_id=account["user_id"],
            email=account["email"],
            role=account["role"],
        )
        return {
            "token": token,
            "user": {
                "id": account["user_id"],
                "email": account["email"],
                "full_name": account["full_name"],
                "role": account["role"],
            },
        }
