# app/schemas/blog.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.category import SLUG_PATTERN
from app.schemas.user import PublicUserResponse

# ==================== Blog Post Schemas ====================


class BlogPostBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    title_en: Optional[str] = Field(None, max_length=255)
    title_fa: Optional[str] = Field(None, max_length=255)
    excerpt: Optional[str] = Field(None, max_length=1000)
    content: str = Field(..., min_length=1)
    thumbnail: Optional[str] = None
    category_id: Optional[str] = None
    tags: Optional[List[str]] = None
    is_published: bool = False
    is_featured: bool = False


class BlogPostCreate(BlogPostBase):
    slug: Optional[str] = Field(None, max_length=255, pattern=SLUG_PATTERN)


class BlogPostUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    title_en: Optional[str] = Field(None, max_length=255)
    title_fa: Optional[str] = Field(None, max_length=255)
    slug: Optional[str] = Field(None, max_length=255, pattern=SLUG_PATTERN)
    excerpt: Optional[str] = Field(None, max_length=1000)
    content: Optional[str] = Field(None, min_length=1)
    thumbnail: Optional[str] = None
    category_id: Optional[str] = None
    tags: Optional[List[str]] = None
    is_published: Optional[bool] = None
    is_featured: Optional[bool] = None


class BlogPostResponse(BlogPostBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    slug: str
    author_id: str
    views_count: int = 0
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


# ==================== Comment Schemas ====================


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=5000)
    parent_id: Optional[str] = None


class CommentResponse(CommentCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    blog_post_id: str
    is_published: bool = True
    created_at: datetime
    updated_at: datetime


class CommentWithUser(CommentResponse):
    user: Optional[PublicUserResponse] = None


class BlogPostDetailResponse(BlogPostResponse):
    author: Optional[PublicUserResponse] = None
    comments: List[CommentWithUser] = []
