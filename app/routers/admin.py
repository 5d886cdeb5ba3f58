from typing import List

from fastapi import APIRouter, Depends, Query

from app.core.config import settings
from app.core.dependencies import get_current_admin, get_storage
from app.schemas.admin import PlatformStats
from app.schemas.course import CourseResponse
from app.schemas.payment import PaymentResponse, PaymentStatusUpdate
from app.schemas.user import AdminUserUpdate, UserInDB, UserResponse
from app.services.admin import AdminService
from app.services.course import CourseService
from app.services.payment import PaymentService
from app.services.user import UserService
from app.storage.base import Storage

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.get("/stats", response_model=PlatformStats)
def get_stats(
    storage: Storage = Depends(get_storage),
    current_admin: UserInDB = Depends(get_current_admin),
):
    return AdminService(storage).get_stats()


# ==================== Users ====================


@router.get("/users", response_model=List[UserResponse])
def get_users(
    offset: int = Query(0, ge=0),
    limit: int = Query(settings.user_page_size, ge=1, le=settings.max_page_size),
    storage: Storage = Depends(get_storage),
    current_admin: UserInDB = Depends(get_current_admin),
):
    users = UserService(storage).list_users(offset=offset, limit=limit)
    return [UserResponse.model_validate(user.model_dump()) for user in users]


@router.put("/users/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    user_in: AdminUserUpdate,
    storage: Storage = Depends(get_storage),
    current_admin: UserInDB = Depends(get_current_admin),
):
    """Change a user's role or account flags"""
    user = UserService(storage).update_user(user_id, user_in, current_admin)
    return UserResponse.model_validate(user.model_dump())


# ==================== Moderation ====================


@router.post("/courses/{course_id}/approve", response_model=CourseResponse)
def approve_course(
    course_id: str,
    storage: Storage = Depends(get_storage),
    current_admin: UserInDB = Depends(get_current_admin),
):
    """Publish a course that is pending review"""
    return CourseService(storage).approve_course(course_id, current_admin)


@router.post("/courses/{course_id}/reject", response_model=CourseResponse)
def reject_course(
    course_id: str,
    storage: Storage = Depends(get_storage),
    current_admin: UserInDB = Depends(get_current_admin),
):
    return CourseService(storage).reject_course(course_id, current_admin)


@router.put("/payments/{payment_id}", response_model=PaymentResponse)
def update_payment(
    payment_id: str,
    payment_in: PaymentStatusUpdate,
    storage: Storage = Depends(get_storage),
    current_admin: UserInDB = Depends(get_current_admin),
):
    """Record a payment outcome; completing it enrolls the payer"""
    return PaymentService(storage).update_status(payment_id, payment_in, current_admin)
