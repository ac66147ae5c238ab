from fastapi import HTTPException, status
from datetime import datetime, timedelta, timezone
from farm_market import config
import bcrypt
import jwt
import logging

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10


class AuthHelpers:
    """Helper functions for authentication operations"""

    @property
    def secret_key(self) -> str:
        if not config.JWT_SECRET_KEY:
            raise ValueError("JWT_SECRET_KEY must be set in environment variables")
        return config.JWT_SECRET_KEY

    def hash_password(self, password: str) -> str:
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
        return hashed.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            logger.warning("Stored password hash has an unexpected format")
            return False

    def create_access_token(self, user_id: int, email: str, role: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "userId": user_id,
            "email": email,
            "role": role,
            "iat": now,
            "exp": now + timedelta(minutes=config.JWT_EXPIRES_MINUTES),
        }
        return jwt.encode(payload, self.secret_key, algorithm=config.JWT_ALGORITHM)

    def verify_token(self, token: str) -> dict:
        """
        Verify a JWT locally and return the caller as
        {user_id, email, role}
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[config.JWT_ALGORITHM],
                options={
                    "verify_exp": True,
                    "verify_signature": True,
                }
            )
        except jwt.ExpiredSignatureError:
            logger.warning("JWT token expired")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Invalid or expired token"
            )
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid JWT token: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Invalid or expired token"
            )

        return {
            "user_id": payload.get("userId"),
            "email": payload.get("email"),
            "role": payload.get("role"),
        }


auth_helpers = AuthHelpers()
