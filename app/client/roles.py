from typing import Optional, Sequence, Tuple

from pydantic import BaseModel

from app.client.api import ApiClient, ApiError


class AccessDenied(BaseModel):
    """What a dashboard renders instead of its content"""

    title: str = "Access denied"
    message: str
    required_roles: Tuple[str, ...]
    current_role: Optional[str] = None


class RoleGate:
    """
    Display-only role check for dashboards.

    Uses the client's cached current user; the API enforces the real rules.
    """

    def __init__(self, client: ApiClient, required_roles: Sequence[str]):
        self.client = client
        self.required_roles = tuple(required_roles)

    def check(self) -> Optional[AccessDenied]:
        """None when the current user may see the page"""
        try:
            user = self.client.current_user()
        except ApiError as e:
            if e.status_code != 401:
                raise
            return AccessDenied(
                message="Please log in to view this page",
                required_roles=self.required_roles,
            )

        if user["role"] in self.required_roles:
            return None

        return AccessDenied(
            message=f"This page requires the {' or '.join(self.required_roles)} role",
            required_roles=self.required_roles,
            current_role=user["role"],
        )
