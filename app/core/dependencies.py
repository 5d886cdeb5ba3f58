import logging
from typing import Optional

from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import settings
from app.core.exceptions import (
    AuthenticationRequired,
    AuthorizationDenied,
    InternalError,
)
from app.core.security import jwt_manager
from app.schemas.user import UserInDB
from app.storage.base import Storage

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_storage(request: Request) -> Storage:
    """The entity store created by the application lifespan"""
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise InternalError("Storage is not initialized")
    return storage


def _session_token(
    request: Request, credentials: Optional[HTTPAuthorizationCredentials]
) -> Optional[str]:
    if credentials:
        return credentials.credentials
    return request.cookies.get(settings.session_cookie_name)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    storage: Storage = Depends(get_storage),
) -> UserInDB:
    """
    Dependency that requires a valid session (cookie or Bearer token) and
    returns the active user.
    Raises 401 if the token is missing, invalid, or the user is not found.
    """
    token = _session_token(request, credentials)
    if not token:
        raise AuthenticationRequired("Not authenticated")

    payload = jwt_manager.verify_token(token, "access")

    user_id = payload.get("user_id")
    if not user_id:
        raise AuthenticationRequired("Invalid token: Not a valid user token")

    user = storage.users.get(user_id)
    if not user:
        raise AuthenticationRequired("User not found")

    if not user.is_active:
        raise AuthorizationDenied("Inactive user")

    return user


def require_roles(*roles: str):
    """
    Dependency factory restricting a route to the given roles.
    Usage: Depends(require_roles("instructor", "admin"))
    """

    def role_checker(user: UserInDB = Depends(get_current_user)) -> UserInDB:
        if user.role not in roles:
            logger.warning(
                f"User {user.username} ({user.role}) denied; requires {', '.join(roles)}"
            )
            raise AuthorizationDenied(f"Requires role: {' or '.join(roles)}")
        return user

    return role_checker


get_current_admin = require_roles("admin")
get_current_instructor = require_roles("instructor", "admin")
