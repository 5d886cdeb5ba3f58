# app/schemas/course.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.category import SLUG_PATTERN
from app.schemas.lesson import LessonResponse
from app.schemas.review import ReviewWithUser
from app.schemas.user import PublicUserResponse

LEVEL_PATTERN = "^(beginner|intermediate|advanced)$"
STATUS_PATTERN = "^(draft|pending|published|rejected)$"

# ==================== Course Schemas ====================


class CourseBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    title_en: Optional[str] = Field(None, max_length=255)
    title_fa: Optional[str] = Field(None, max_length=255)
    description: str = Field(..., min_length=1)
    short_description: Optional[str] = Field(None, max_length=500)
    thumbnail: Optional[str] = None
    preview_video: Optional[str] = None
    price: float = Field(..., ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    level: str = Field(..., pattern=LEVEL_PATTERN)
    language: str = Field(default="en", min_length=2, max_length=10)
    duration: Optional[int] = Field(None, ge=0, description="Duration in minutes")
    category_id: str
    tags: Optional[List[str]] = None
    requirements: Optional[List[str]] = None
    what_you_will_learn: Optional[List[str]] = None


class CourseCreate(CourseBase):
    # Generated from the title when omitted
    slug: Optional[str] = Field(None, max_length=255, pattern=SLUG_PATTERN)
    # Instructors may submit straight for review
    status: str = Field(default="draft", pattern="^(draft|pending)$")


class CourseUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    title_en: Optional[str] = Field(None, max_length=255)
    title_fa: Optional[str] = Field(None, max_length=255)
    slug: Optional[str] = Field(None, max_length=255, pattern=SLUG_PATTERN)
    description: Optional[str] = Field(None, min_length=1)
    short_description: Optional[str] = Field(None, max_length=500)
    thumbnail: Optional[str] = None
    preview_video: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    level: Optional[str] = Field(None, pattern=LEVEL_PATTERN)
    language: Optional[str] = Field(None, min_length=2, max_length=10)
    duration: Optional[int] = Field(None, ge=0)
    category_id: Optional[str] = None
    tags: Optional[List[str]] = None
    requirements: Optional[List[str]] = None
    what_you_will_learn: Optional[List[str]] = None

    # Moderation and publish flags (see CourseService.update_course)
    status: Optional[str] = Field(None, pattern=STATUS_PATTERN)
    is_published: Optional[bool] = None
    is_featured: Optional[bool] = None


class CourseResponse(CourseBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    slug: str
    instructor_id: str
    status: str = Field(default="draft", pattern=STATUS_PATTERN)
    lessons_count: int = 0
    students_count: int = 0
    rating: float = 0.0
    reviews_count: int = 0
    is_featured: bool = False
    is_published: bool = False
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class CourseDetailResponse(CourseResponse):
    lessons: List[LessonResponse] = []
    reviews: List[ReviewWithUser] = []
    instructor: Optional[PublicUserResponse] = None
