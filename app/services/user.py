import logging
from typing import List, Optional

from app.core.exceptions import NotFound, ValidationFailed
from app.schemas.user import AdminUserUpdate, PublicUserResponse, UserInDB
from app.storage.base import Storage

logger = logging.getLogger(__name__)


def to_public(user: Optional[UserInDB]) -> Optional[PublicUserResponse]:
    if user is None:
        return None
    return PublicUserResponse.model_validate(user.model_dump())


class UserService:
    def __init__(self, storage: Storage):
        self.storage = storage

    def get_user(self, user_id: str) -> UserInDB:
        user = self.storage.users.get(user_id)
        if not user:
            raise NotFound("User not found")
        return user

    def list_users(self, offset: int = 0, limit: int = 50) -> List[UserInDB]:
        return self.storage.users.list(offset=offset, limit=limit)

    def list_instructors(self) -> List[PublicUserResponse]:
        instructors = self.storage.users.list(
            filters={"role": "instructor", "is_active": True}
        )
        return [to_public(user) for user in instructors]

    def update_user(
        self, user_id: str, user_in: AdminUserUpdate, admin: UserInDB
    ) -> UserInDB:
        """Change role or account flags (admin only)"""
        self.get_user(user_id)
        changes = user_in.model_dump(exclude_unset=True, exclude_none=True)

        if user_id == admin.id and (
            changes.get("role", "admin") != "admin" or changes.get("is_active") is False
        ):
            raise ValidationFailed("Admins cannot demote or deactivate themselves")

        user = self.storage.users.update(user_id, changes)
        logger.info(f"Admin {admin.username} updated user {user.username}: {changes}")
        return user
