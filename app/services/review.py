import logging
from typing import List

from app.core.exceptions import ValidationFailed
from app.schemas.review import ReviewCreate, ReviewResponse, ReviewWithUser
from app.schemas.user import UserInDB
from app.services.course import CourseService
from app.services.enrollment import EnrollmentService
from app.services.user import to_public
from app.storage.base import Storage

logger = logging.getLogger(__name__)


class ReviewService:
    def __init__(self, storage: Storage):
        self.storage = storage
        self.courses = CourseService(storage)
        self.enrollments = EnrollmentService(storage)

    def get_reviews(self, course_id: str) -> List[ReviewWithUser]:
        """Published reviews, newest first"""
        self.courses.get_course(course_id)
        return [
            ReviewWithUser(
                **review.model_dump(),
                user=to_public(self.storage.users.get(review.user_id)),
            )
            for review in self.storage.reviews.list(
                filters={"course_id": course_id, "is_published": True}
            )
        ]

    def create_review(
        self, course_id: str, review_in: ReviewCreate, user: UserInDB
    ) -> ReviewResponse:
        self.courses.get_course(course_id)

        if not self.enrollments.is_enrolled(user.id, course_id):
            raise ValidationFailed("Must be enrolled to review this course")

        review = self.storage.reviews.create(
            {**review_in.model_dump(), "user_id": user.id, "course_id": course_id}
        )
        self.courses.refresh_rating(course_id)

        logger.info(f"Review {review.id} ({review.rating}/5) on course {course_id}")
        return review
