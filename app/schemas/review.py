# app/schemas/review.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.user import PublicUserResponse


class ReviewCreate(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = Field(None, max_length=5000)


class ReviewResponse(ReviewCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    course_id: str
    is_published: bool = True
    created_at: datetime
    updated_at: datetime


class ReviewWithUser(ReviewResponse):
    user: Optional[PublicUserResponse] = None
