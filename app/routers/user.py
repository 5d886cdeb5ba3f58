# Learner dashboard and public user endpoints
from typing import List

from fastapi import APIRouter, Depends

from app.core.dependencies import get_current_user, get_storage
from app.schemas.enrollment import EnrollmentResponse, EnrollmentUpdate, EnrollmentWithCourse
from app.schemas.payment import PaymentResponse
from app.schemas.user import PublicUserResponse, UserInDB
from app.schemas.wishlist import WishlistWithCourse
from app.services.enrollment import EnrollmentService
from app.services.payment import PaymentService
from app.services.user import UserService
from app.services.wishlist import WishlistService
from app.storage.base import Storage

router = APIRouter(prefix="/api", tags=["Learner"])


@router.get("/my-enrollments", response_model=List[EnrollmentWithCourse])
def get_my_enrollments(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    return EnrollmentService(storage).get_user_enrollments(current_user.id)


@router.put("/enrollments/{enrollment_id}", response_model=EnrollmentResponse)
def update_enrollment(
    enrollment_id: str,
    enrollment_in: EnrollmentUpdate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    """Report progress on an enrollment (owner or admin)"""
    return EnrollmentService(storage).update_enrollment(
        enrollment_id, enrollment_in, current_user
    )


@router.get("/my-wishlist", response_model=List[WishlistWithCourse])
def get_my_wishlist(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    return WishlistService(storage).get_user_wishlist(current_user.id)


@router.get("/my-payments", response_model=List[PaymentResponse])
def get_my_payments(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    return PaymentService(storage).get_user_payments(current_user.id)


@router.get("/instructors", response_model=List[PublicUserResponse])
def get_instructors(storage: Storage = Depends(get_storage)):
    """Active instructors (public profile fields only)"""
    return UserService(storage).list_instructors()
