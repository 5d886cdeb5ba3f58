# app/services/course.py
import logging
from typing import Any, Dict, List, Optional

from app.core.exceptions import (
    AuthorizationDenied,
    DuplicateEntry,
    NotFound,
    ValidationFailed,
)
from app.schemas.course import (
    CourseCreate,
    CourseDetailResponse,
    CourseResponse,
    CourseUpdate,
)
from app.schemas.review import ReviewWithUser
from app.schemas.user import UserInDB
from app.services.user import to_public
from app.storage.base import Storage, utcnow
from app.utils.text import unique_slug

logger = logging.getLogger(__name__)

# (from, to) -> roles allowed to make the move
STATUS_TRANSITIONS = {
    ("draft", "pending"): {"instructor", "admin"},
    ("pending", "published"): {"admin"},
    ("pending", "rejected"): {"admin"},
}

ADMIN_ONLY_FLAGS = ("is_published", "is_featured")


def can_manage(course: CourseResponse, user: UserInDB) -> bool:
    return user.role == "admin" or course.instructor_id == user.id


class CourseService:
    def __init__(self, storage: Storage):
        self.storage = storage

    def create_course(self, course_in: CourseCreate, instructor: UserInDB) -> CourseResponse:
        """Create a course owned by the caller (instructor or admin)"""
        if not self.storage.categories.get(course_in.category_id):
            raise NotFound("Category not found")

        data = course_in.model_dump()
        if data.get("slug"):
            if self.storage.courses.find(slug=data["slug"]):
                raise DuplicateEntry("Course with this slug already exists")
        else:
            data["slug"] = unique_slug(
                course_in.title, lambda s: self.storage.courses.find(slug=s) is not None
            )

        data["instructor_id"] = instructor.id
        data["is_published"] = False
        data["is_featured"] = False

        course = self.storage.courses.create(data)
        logger.info(
            f"Course created: {course.slug} by {instructor.username} ({course.status})"
        )
        return course

    def get_course(self, course_id: str) -> CourseResponse:
        course = self.storage.courses.get(course_id)
        if not course:
            raise NotFound("Course not found")
        return course

    def get_course_detail(self, course_id: str) -> CourseDetailResponse:
        """Course with its ordered lessons, published reviews and instructor"""
        course = self.get_course(course_id)

        lessons = self.storage.lessons.list(filters={"course_id": course_id})
        reviews = [
            ReviewWithUser(
                **review.model_dump(),
                user=to_public(self.storage.users.get(review.user_id)),
            )
            for review in self.storage.reviews.list(
                filters={"course_id": course_id, "is_published": True}
            )
        ]

        return CourseDetailResponse(
            **course.model_dump(),
            lessons=lessons,
            reviews=reviews,
            instructor=to_public(self.storage.users.get(course.instructor_id)),
        )

    def get_courses(
        self,
        category_id: Optional[str] = None,
        instructor_id: Optional[str] = None,
        level: Optional[str] = None,
        status: Optional[str] = None,
        is_published: Optional[bool] = None,
        is_featured: Optional[bool] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: int = 50,
    ) -> List[CourseResponse]:
        filters = {
            "category_id": category_id,
            "instructor_id": instructor_id,
            "level": level,
            "status": status,
            "is_published": is_published,
            "is_featured": is_featured,
        }
        return self.storage.courses.list(
            filters=filters, search=search, offset=offset, limit=limit
        )

    def update_course(
        self, course_id: str, course_in: CourseUpdate, user: UserInDB
    ) -> CourseResponse:
        """Partial update by the owner or an admin"""
        course = self.get_course(course_id)
        if not can_manage(course, user):
            raise AuthorizationDenied("You can only edit your own courses")

        changes = course_in.model_dump(exclude_unset=True)
        # Explicit nulls never clear required fields
        changes = {k: v for k, v in changes.items() if v is not None}

        for flag in ADMIN_ONLY_FLAGS:
            if flag in changes and user.role != "admin":
                raise AuthorizationDenied(f"Only admins can change {flag}")

        if "category_id" in changes and not self.storage.categories.get(
            changes["category_id"]
        ):
            raise NotFound("Category not found")

        slug = changes.get("slug")
        if slug and slug != course.slug and self.storage.courses.find(slug=slug):
            raise DuplicateEntry("Course with this slug already exists")

        new_status = changes.pop("status", None)
        target_status = new_status or course.status
        if "is_published" in changes and changes["is_published"] != (
            target_status == "published"
        ):
            raise ValidationFailed(
                f"is_published={changes['is_published']} does not match status {target_status}"
            )

        if new_status and new_status != course.status:
            self._check_transition(course.status, new_status, user)
            changes.update(self._status_changes(course, new_status))

        return self.storage.courses.update(course_id, changes)

    def delete_course(self, course_id: str, user: UserInDB) -> None:
        """Hard-delete. Lessons, enrollments and reviews are left in place."""
        course = self.get_course(course_id)
        if not can_manage(course, user):
            raise AuthorizationDenied("You can only delete your own courses")

        self.storage.courses.delete(course_id)
        logger.info(f"Course deleted: {course.slug} by {user.username}")

    # ---------- moderation ----------

    def approve_course(self, course_id: str, admin: UserInDB) -> CourseResponse:
        return self._moderate(course_id, "published", admin)

    def reject_course(self, course_id: str, admin: UserInDB) -> CourseResponse:
        return self._moderate(course_id, "rejected", admin)

    def _moderate(self, course_id: str, new_status: str, admin: UserInDB) -> CourseResponse:
        course = self.get_course(course_id)
        if course.status != "pending":
            raise ValidationFailed(
                f"Only pending courses can be moderated (current status: {course.status})"
            )
        self._check_transition(course.status, new_status, admin)

        course = self.storage.courses.update(
            course_id, self._status_changes(course, new_status)
        )
        logger.info(f"Course {course.slug} {new_status} by {admin.username}")
        return course

    @staticmethod
    def _check_transition(current: str, new_status: str, user: UserInDB) -> None:
        allowed = STATUS_TRANSITIONS.get((current, new_status))
        if allowed is None:
            raise ValidationFailed(
                f"Invalid status transition: {current} -> {new_status}"
            )
        if user.role not in allowed:
            raise AuthorizationDenied(
                f"Only {' or '.join(sorted(allowed))} can move a course from {current} to {new_status}"
            )

    @staticmethod
    def _status_changes(course: CourseResponse, new_status: str) -> Dict[str, Any]:
        changes: Dict[str, Any] = {"status": new_status}
        if new_status == "published":
            changes["is_published"] = True
            if course.published_at is None:
                changes["published_at"] = utcnow()
        elif new_status == "rejected":
            changes["is_published"] = False
        return changes

    # ---------- counters ----------

    def refresh_lessons_count(self, course_id: str) -> None:
        count = self.storage.lessons.count({"course_id": course_id})
        self.storage.courses.update(course_id, {"lessons_count": count})

    def refresh_students_count(self, course_id: str) -> None:
        count = self.storage.enrollments.count({"course_id": course_id})
        self.storage.courses.update(course_id, {"students_count": count})

    def refresh_rating(self, course_id: str) -> None:
        reviews = self.storage.reviews.list(
            filters={"course_id": course_id, "is_published": True}
        )
        rating = (
            round(sum(r.rating for r in reviews) / len(reviews), 2) if reviews else 0.0
        )
        self.storage.courses.update(
            course_id, {"rating": rating, "reviews_count": len(reviews)}
        )
