import logging
from typing import List

from app.core.config import settings
from app.core.exceptions import NotFound, ValidationFailed
from app.schemas.payment import PaymentCreate, PaymentResponse, PaymentStatusUpdate
from app.schemas.user import UserInDB
from app.services.course import CourseService
from app.services.enrollment import EnrollmentService
from app.storage.base import Storage

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(self, storage: Storage):
        self.storage = storage
        self.courses = CourseService(storage)
        self.enrollments = EnrollmentService(storage)

    def create_payment(
        self, course_id: str, payment_in: PaymentCreate, user: UserInDB
    ) -> PaymentResponse:
        """Open a pending payment for the course's current price"""
        course = self.courses.get_course(course_id)

        if self.enrollments.is_enrolled(user.id, course_id):
            raise ValidationFailed("Already enrolled in this course")

        payment = self.storage.payments.create(
            {
                "user_id": user.id,
                "course_id": course_id,
                "amount": course.price,
                "currency": settings.payment_currency,
                "payment_method": payment_in.payment_method,
            }
        )
        logger.info(
            f"Payment {payment.id} opened by {user.username} for {course.slug}: "
            f"{payment.amount} {payment.currency}"
        )
        return payment

    def get_user_payments(self, user_id: str) -> List[PaymentResponse]:
        return self.storage.payments.list(filters={"user_id": user_id})

    def update_status(
        self, payment_id: str, payment_in: PaymentStatusUpdate, admin: UserInDB
    ) -> PaymentResponse:
        """Set the payment outcome; a completed payment enrolls the payer"""
        payment = self.storage.payments.get(payment_id)
        if not payment:
            raise NotFound("Payment not found")
        if payment_in.status == "completed":
            # Course must still exist before the payment is marked completed
            self.courses.get_course(payment.course_id)

        payment = self.storage.payments.update(
            payment_id, payment_in.model_dump(exclude_unset=True, exclude_none=True)
        )
        logger.info(f"Payment {payment.id} marked {payment.status} by {admin.username}")

        if payment.status == "completed" and not self.enrollments.is_enrolled(
            payment.user_id, payment.course_id
        ):
            self.enrollments.enroll(payment.user_id, payment.course_id)

        return payment
