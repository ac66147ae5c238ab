from fastapi import APIRouter, Depends, HTTPException, status, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from farm_market.config import get_db
from farm_market.repositories.users import UserRepository
from farm_market.services.auth import (
    AuthService,
    EmailAlreadyRegisteredError,
    UserNotFoundError,
    InvalidCredentialsError,
)
from .schemas import (
    UserRegister,
    UserLogin,
    MessageResponse,
    LoginResponse,
    CurrentUserResponse,
)
from .helpers import auth_helpers
from typing import Optional
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])

security = HTTPBearer(auto_error=False)


def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(UserRepository(db))


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
):
    """Get current user from the bearer token"""
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided."
        )

    current_user = auth_helpers.verify_token(credentials.credentials)
    logger.info(f"User {current_user['user_id']} authenticated with role: {current_user['role']}")

    request.state.current_user = current_user
    return current_user


async def is_authenticated(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
):
    """Lenient variant: every failure is reported as a plain 401"""
    try:
        return await get_current_user(request, credentials)
    except HTTPException:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="unauthorized"
        )


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    service: AuthService = Depends(get_auth_service)
):
    try:
        await service.register({
            "full_name": user_data.full_name,
            "email": user_data.email,
            "phone": user_data.phone,
            "role": user_data.role.value,
            "password": user_data.password,
        })
        return MessageResponse(message="User registered successfully!")

    except EmailAlreadyRegisteredError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Registration failed: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error"
        )


@router.post("/login", response_model=LoginResponse)
async def login(
    user_data: UserLogin,
    service: AuthService = Depends(get_auth_service)
):
    try:
        result = await service.login(user_data.email, user_data.password)
        return LoginResponse(token=result["token"], user=result["user"])

    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Login failed: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error"
        )


@router.post("/logout", response_model=MessageResponse)
async def logout():
    # Tokens are stateless; the client discards its copy
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(current_user: dict = Depends(get_current_user)):
    """Claims carried by the caller's token"""
    return CurrentUserResponse(**current_user)
