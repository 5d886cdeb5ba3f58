import logging

from app.core.exceptions import AuthenticationRequired, DuplicateEntry
from app.core.security import PasswordHelper, jwt_manager
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.schemas.user import UserInDB, UserResponse
from app.storage.base import Storage

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, storage: Storage):
        self.storage = storage
        self.password_helper = PasswordHelper()

    def register(self, request: RegisterRequest) -> AuthResponse:
        """Create a student or instructor account and open a session for it"""
        users = self.storage.users

        if users.find(username=request.username):
            raise DuplicateEntry("Username already exists")
        if users.find(email=request.email):
            raise DuplicateEntry("Email already registered")

        data = request.model_dump(exclude={"password"})
        data["password"] = self.password_helper.hash_password(request.password)
        user = users.create(data)

        logger.info(f"User registered: {user.username} ({user.role})")
        return self._session_for(user)

    def login(self, request: LoginRequest) -> AuthResponse:
        user = self.storage.users.find(username=request.username)

        if not user or not self.password_helper.check_password(
            request.password, user.password
        ):
            logger.warning(f"Failed login attempt for username: {request.username}")
            raise AuthenticationRequired("Invalid username or password")

        if not user.is_active:
            raise AuthenticationRequired("Account is deactivated")

        logger.info(f"User login successful: {user.username}")
        return self._session_for(user)

    def _session_for(self, user: UserInDB) -> AuthResponse:
        return AuthResponse(
            user=UserResponse.model_validate(user.model_dump()),
            access_token=jwt_manager.create_access_token(user),
        )
