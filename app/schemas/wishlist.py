# app/schemas/wishlist.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.schemas.course import CourseResponse


class WishlistResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    course_id: str
    created_at: datetime


class WishlistWithCourse(WishlistResponse):
    course: Optional[CourseResponse] = None


class WishlistStatus(BaseModel):
    in_wishlist: bool
