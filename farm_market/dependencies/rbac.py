"""
RBAC dependencies for FastAPI routes
Role checks implemented as dependencies that run after authentication
"""
from fastapi import Depends, HTTPException, status, Request
from farm_market.routers.auth.auth import get_current_user
from typing import Dict, Any
import logging

logger = logging.getLogger(__name__)

ROLE_DENIED_MESSAGES = {
    'farmer': "Access denied. Farmers only",
    'admin': "Forbidden - Admins only",
}


def has_role(current_user: Dict[str, Any], *roles: str) -> bool:
    """Check if the authenticated user carries one of the roles"""
    if not current_user:
        return False
    return current_user.get('role') in roles


def require_role(*roles: str):
    """
    Create an RBAC dependency that lets through only the given roles

    Args:
        roles: Role names allowed to reach the route
    """
    def check_role(request: Request, current_user: Dict[str, Any] = Depends(get_current_user)):
        """RBAC dependency function"""
        user = current_user or getattr(request.state, 'current_user', None)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User not authenticated"
            )

        user_role = user.get('role')
        logger.info(f"RBAC Check - User: {user.get('user_id')}, Role: {user_role}, Allowed: {roles}")

        if not has_role(user, *roles):
            logger.warning(f"Access denied - User: {user.get('user_id')}, Role: {user_role}, Allowed: {roles}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=ROLE_DENIED_MESSAGES.get(roles[0], "Access denied") if len(roles) == 1 else "Access denied"
            )

        return user

    return check_role


require_farmer = require_role("farmer")
require_admin = require_role("admin")
