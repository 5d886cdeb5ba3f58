# app/schemas/user.py
from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

ROLE_PATTERN = "^(student|instructor|admin)$"

# ==================== User Schemas ====================


class UserResponse(BaseModel):
    """User as returned by the API (never carries the password hash)"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: str = Field(default="student", pattern=ROLE_PATTERN)
    avatar: Optional[str] = None
    bio: Optional[str] = None
    website: Optional[str] = None
    social_links: Optional[Dict[str, str]] = None
    is_active: bool = True
    email_verified: bool = False
    created_at: datetime
    updated_at: datetime


class UserInDB(UserResponse):
    """Stored user record"""

    password: str


class PublicUserResponse(BaseModel):
    """Subset of a user shown next to courses, reviews and posts"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: str
    avatar: Optional[str] = None
    bio: Optional[str] = None


class AdminUserUpdate(BaseModel):
    role: Optional[str] = Field(None, pattern=ROLE_PATTERN)
    is_active: Optional[bool] = None
    email_verified: Optional[bool] = None
