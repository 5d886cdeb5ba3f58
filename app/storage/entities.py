# app/storage/entities.py
from dataclasses import dataclass
from typing import Optional, Tuple, Type

from pydantic import BaseModel

from app.schemas.blog import BlogPostResponse, CommentResponse
from app.schemas.category import CategoryResponse
from app.schemas.course import CourseResponse
from app.schemas.enrollment import EnrollmentResponse
from app.schemas.lesson import LessonResponse
from app.schemas.payment import PaymentResponse
from app.schemas.review import ReviewResponse
from app.schemas.user import UserInDB
from app.schemas.wishlist import WishlistResponse


@dataclass(frozen=True)
class EntitySpec:
    """How one entity type is stored, ordered and searched."""

    name: str
    record: Type[BaseModel]
    created_field: str = "created_at"
    # None keeps insertion order
    order_by: Optional[str] = None
    descending: bool = False
    search_fields: Tuple[str, ...] = ()

    @property
    def has_updated_at(self) -> bool:
        return "updated_at" in self.record.model_fields


USERS = EntitySpec("users", UserInDB, search_fields=("username", "email"))
CATEGORIES = EntitySpec("categories", CategoryResponse, search_fields=("name",))
COURSES = EntitySpec(
    "courses", CourseResponse, search_fields=("title", "description")
)
LESSONS = EntitySpec("lessons", LessonResponse, order_by="order_index")
ENROLLMENTS = EntitySpec("enrollments", EnrollmentResponse, created_field="enrolled_at")
REVIEWS = EntitySpec("reviews", ReviewResponse, order_by="created_at", descending=True)
PAYMENTS = EntitySpec("payments", PaymentResponse)
BLOG_POSTS = EntitySpec(
    "blog_posts",
    BlogPostResponse,
    order_by="created_at",
    descending=True,
    search_fields=("title", "content"),
)
COMMENTS = EntitySpec("comments", CommentResponse, order_by="created_at")
WISHLIST = EntitySpec(
    "wishlist", WishlistResponse, order_by="created_at", descending=True
)

ENTITY_SPECS = (
    USERS,
    CATEGORIES,
    COURSES,
    LESSONS,
    ENROLLMENTS,
    REVIEWS,
    PAYMENTS,
    BLOG_POSTS,
    COMMENTS,
    WISHLIST,
)
