# app/routers/course.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.core.config import settings
from app.core.dependencies import get_current_instructor, get_current_user, get_storage
from app.schemas.course import (
    CourseCreate,
    CourseDetailResponse,
    CourseResponse,
    CourseUpdate,
)
from app.schemas.enrollment import EnrollmentResponse
from app.schemas.lesson import LessonCreate, LessonResponse
from app.schemas.payment import PaymentCreate, PaymentResponse
from app.schemas.review import ReviewCreate, ReviewResponse, ReviewWithUser
from app.schemas.user import UserInDB
from app.schemas.wishlist import WishlistResponse, WishlistStatus
from app.services.course import CourseService
from app.services.enrollment import EnrollmentService
from app.services.lesson import LessonService
from app.services.payment import PaymentService
from app.services.review import ReviewService
from app.services.wishlist import WishlistService
from app.storage.base import Storage

router = APIRouter(
    prefix="/api/courses",
    tags=["Courses"],
    responses={404: {"description": "Not found"}},
)


# ==================== Course Endpoints ====================


@router.get("", response_model=List[CourseResponse])
def get_courses(
    category_id: Optional[str] = Query(None, description="Filter by category"),
    instructor_id: Optional[str] = Query(None, description="Filter by instructor"),
    level: Optional[str] = Query(None, description="beginner, intermediate or advanced"),
    status: Optional[str] = Query(None, description="Filter by moderation status"),
    is_published: Optional[bool] = Query(None),
    is_featured: Optional[bool] = Query(None),
    search: Optional[str] = Query(None, description="Search title and description"),
    offset: int = Query(0, ge=0),
    limit: int = Query(settings.course_page_size, ge=1, le=settings.max_page_size),
    storage: Storage = Depends(get_storage),
):
    """
    Course catalog with equality filters and text search.
    Available to all users (authenticated or not).
    """
    return CourseService(storage).get_courses(
        category_id=category_id,
        instructor_id=instructor_id,
        level=level,
        status=status,
        is_published=is_published,
        is_featured=is_featured,
        search=search,
        offset=offset,
        limit=limit,
    )


@router.get("/{course_id}", response_model=CourseDetailResponse)
def get_course(course_id: str, storage: Storage = Depends(get_storage)):
    """Course with lessons, published reviews and instructor"""
    return CourseService(storage).get_course_detail(course_id)


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
def create_course(
    course_in: CourseCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_instructor),
):
    """Create a new course (instructor or admin)"""
    return CourseService(storage).create_course(course_in, current_user)


@router.put("/{course_id}", response_model=CourseResponse)
def update_course(
    course_id: str,
    course_in: CourseUpdate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    """Update a course (owner or admin)"""
    return CourseService(storage).update_course(course_id, course_in, current_user)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(
    course_id: str,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    """Delete a course (owner or admin)"""
    CourseService(storage).delete_course(course_id, current_user)


# ==================== Enrollment & Payment ====================


@router.post(
    "/{course_id}/enroll",
    response_model=EnrollmentResponse,
    status_code=status.HTTP_201_CREATED,
)
def enroll(
    course_id: str,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    return EnrollmentService(storage).enroll(current_user.id, course_id)


@router.post(
    "/{course_id}/payments",
    response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_payment(
    course_id: str,
    payment_in: PaymentCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    """Open a pending payment for this course"""
    return PaymentService(storage).create_payment(course_id, payment_in, current_user)


# ==================== Reviews ====================


@router.get("/{course_id}/reviews", response_model=List[ReviewWithUser])
def get_reviews(course_id: str, storage: Storage = Depends(get_storage)):
    return ReviewService(storage).get_reviews(course_id)


@router.post(
    "/{course_id}/reviews",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_review(
    course_id: str,
    review_in: ReviewCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    """Review a course the caller is enrolled in"""
    return ReviewService(storage).create_review(course_id, review_in, current_user)


# ==================== Wishlist ====================


@router.get("/{course_id}/wishlist", response_model=WishlistStatus)
def get_wishlist_status(
    course_id: str,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    in_wishlist = WishlistService(storage).is_in_wishlist(current_user.id, course_id)
    return WishlistStatus(in_wishlist=in_wishlist)


@router.post(
    "/{course_id}/wishlist",
    response_model=WishlistResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_to_wishlist(
    course_id: str,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    return WishlistService(storage).add(current_user.id, course_id)


@router.delete("/{course_id}/wishlist", status_code=status.HTTP_204_NO_CONTENT)
def remove_from_wishlist(
    course_id: str,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    WishlistService(storage).remove(current_user.id, course_id)


# ==================== Lessons ====================


@router.get("/{course_id}/lessons", response_model=List[LessonResponse])
def get_lessons(course_id: str, storage: Storage = Depends(get_storage)):
    """Lessons ordered by order_index"""
    return LessonService(storage).get_lessons(course_id)


@router.post(
    "/{course_id}/lessons",
    response_model=LessonResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_lesson(
    course_id: str,
    lesson_in: LessonCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    """Add a lesson (course owner or admin)"""
    return LessonService(storage).create_lesson(course_id, lesson_in, current_user)
