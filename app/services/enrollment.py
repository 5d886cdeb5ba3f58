# app/services/enrollment.py
import logging
from typing import Any, Dict, List

from app.core.exceptions import AuthorizationDenied, DuplicateEntry, NotFound, ValidationFailed
from app.schemas.enrollment import EnrollmentResponse, EnrollmentUpdate, EnrollmentWithCourse
from app.schemas.user import UserInDB
from app.services.course import CourseService
from app.storage.base import Storage, utcnow

logger = logging.getLogger(__name__)


class EnrollmentService:
    def __init__(self, storage: Storage):
        self.storage = storage
        self.courses = CourseService(storage)

    def is_enrolled(self, user_id: str, course_id: str) -> bool:
        return (
            self.storage.enrollments.find(user_id=user_id, course_id=course_id)
            is not None
        )

    def enroll(self, user_id: str, course_id: str) -> EnrollmentResponse:
        """Enroll a user in a course and bump the course's student counter"""
        course = self.courses.get_course(course_id)

        if self.is_enrolled(user_id, course_id):
            raise DuplicateEntry("Already enrolled in this course")

        enrollment = self.storage.enrollments.create(
            {"user_id": user_id, "course_id": course_id}
        )
        self.courses.refresh_students_count(course_id)

        logger.info(f"User {user_id} enrolled in course {course.slug}")
        return enrollment

    def get_user_enrollments(self, user_id: str) -> List[EnrollmentWithCourse]:
        return [
            EnrollmentWithCourse(
                **enrollment.model_dump(),
                course=self.storage.courses.get(enrollment.course_id),
            )
            for enrollment in self.storage.enrollments.list(filters={"user_id": user_id})
        ]

    def update_enrollment(
        self, enrollment_id: str, enrollment_in: EnrollmentUpdate, user: UserInDB
    ) -> EnrollmentResponse:
        """
        Record learner progress.

        ``completed_lessons`` must reference lessons of the enrolled course; when
        no explicit ``progress`` is sent it is derived from them. Reaching 100
        completes the enrollment, and completing it forces progress to 100.
        """
        enrollment = self.storage.enrollments.get(enrollment_id)
        if not enrollment:
            raise NotFound("Enrollment not found")
        if enrollment.user_id != user.id and user.role != "admin":
            raise AuthorizationDenied("You can only update your own enrollments")

        changes: Dict[str, Any] = enrollment_in.model_dump(
            exclude_unset=True, exclude_none=True
        )

        if "completed_lessons" in changes:
            changes["completed_lessons"] = self._check_lessons(
                enrollment.course_id, changes["completed_lessons"]
            )
            if "progress" not in changes:
                total = self.storage.lessons.count({"course_id": enrollment.course_id})
                if total:
                    changes["progress"] = round(
                        len(changes["completed_lessons"]) * 100 / total
                    )

        status = changes.get("status")
        if status == "completed":
            changes["progress"] = 100
        elif changes.get("progress") == 100 and status is None:
            changes["status"] = "completed"
        elif (
            status is None
            and enrollment.status == "completed"
            and changes.get("progress", 100) < 100
        ):
            changes["status"] = "active"

        if changes.get("status", enrollment.status) == "completed":
            if enrollment.completed_at is None:
                changes["completed_at"] = utcnow()
        else:
            changes["completed_at"] = None

        return self.storage.enrollments.update(enrollment_id, changes)

    def _check_lessons(self, course_id: str, lesson_ids: List[str]) -> List[str]:
        unique_ids = list(dict.fromkeys(lesson_ids))
        for lesson_id in unique_ids:
            lesson = self.storage.lessons.get(lesson_id)
            if not lesson or lesson.course_id != course_id:
                raise ValidationFailed(f"Lesson {lesson_id} is not part of this course")
        return unique_ids
