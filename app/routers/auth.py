from fastapi import APIRouter, Depends, Response, status

from app.core.config import settings
from app.core.dependencies import get_current_user, get_storage
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.schemas.user import UserInDB, UserResponse
from app.services.auth import AuthService
from app.storage.base import Storage

router = APIRouter(prefix="/api", tags=["auth"])


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.jwt_user_expiration * 24 * 60 * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
def register(
    request: RegisterRequest,
    response: Response,
    storage: Storage = Depends(get_storage),
) -> AuthResponse:
    """Create a student or instructor account and start a session"""
    auth = AuthService(storage).register(request)
    set_session_cookie(response, auth.access_token)
    return auth


@router.post("/login", response_model=AuthResponse)
def login(
    request: LoginRequest,
    response: Response,
    storage: Storage = Depends(get_storage),
) -> AuthResponse:
    auth = AuthService(storage).login(request)
    set_session_cookie(response, auth.access_token)
    return auth


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(settings.session_cookie_name)
    return {"message": "Logged out"}


@router.get("/user", response_model=UserResponse)
def get_me(current_user: UserInDB = Depends(get_current_user)):
    """Current user profile"""
    return UserResponse.model_validate(current_user.model_dump())
