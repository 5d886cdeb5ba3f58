# app/schemas/lesson.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# ==================== Lesson Schemas ====================


class LessonBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    video_url: Optional[str] = None
    duration: Optional[int] = Field(None, ge=0, description="Duration in seconds")
    order_index: int = Field(..., ge=0, description="Position within the course")
    is_free: bool = False


class LessonCreate(LessonBase):
    pass


class LessonUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    video_url: Optional[str] = None
    duration: Optional[int] = Field(None, ge=0)
    order_index: Optional[int] = Field(None, ge=0)
    is_free: Optional[bool] = None


class LessonResponse(LessonBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    course_id: str
    created_at: datetime
    updated_at: datetime
