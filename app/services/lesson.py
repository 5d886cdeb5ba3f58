import logging
from typing import List

from app.core.exceptions import AuthorizationDenied, NotFound
from app.schemas.lesson import LessonCreate, LessonResponse, LessonUpdate
from app.schemas.user import UserInDB
from app.services.course import CourseService, can_manage
from app.storage.base import Storage

logger = logging.getLogger(__name__)


class LessonService:
    def __init__(self, storage: Storage):
        self.storage = storage
        self.courses = CourseService(storage)

    def get_lessons(self, course_id: str) -> List[LessonResponse]:
        """Lessons of a course, ordered by order_index"""
        self.courses.get_course(course_id)
        return self.storage.lessons.list(filters={"course_id": course_id})

    def create_lesson(
        self, course_id: str, lesson_in: LessonCreate, user: UserInDB
    ) -> LessonResponse:
        course = self.courses.get_course(course_id)
        if not can_manage(course, user):
            raise AuthorizationDenied("You can only add lessons to your own courses")

        lesson = self.storage.lessons.create(
            {**lesson_in.model_dump(), "course_id": course_id}
        )
        self.courses.refresh_lessons_count(course_id)

        logger.info(f"Lesson {lesson.id} added to course {course.slug}")
        return lesson

    def update_lesson(
        self, lesson_id: str, lesson_in: LessonUpdate, user: UserInDB
    ) -> LessonResponse:
        lesson = self._get_managed_lesson(lesson_id, user)
        changes = {
            k: v for k, v in lesson_in.model_dump(exclude_unset=True).items()
            if v is not None or k in ("description", "video_url", "duration")
        }
        return self.storage.lessons.update(lesson.id, changes)

    def delete_lesson(self, lesson_id: str, user: UserInDB) -> None:
        lesson = self._get_managed_lesson(lesson_id, user)
        self.storage.lessons.delete(lesson.id)
        self.courses.refresh_lessons_count(lesson.course_id)
        logger.info(f"Lesson {lesson.id} deleted by {user.username}")

    def _get_managed_lesson(self, lesson_id: str, user: UserInDB) -> LessonResponse:
        lesson = self.storage.lessons.get(lesson_id)
        if not lesson:
            raise NotFound("Lesson not found")

        course = self.courses.get_course(lesson.course_id)
        if not can_manage(course, user):
            raise AuthorizationDenied("You can only edit lessons of your own courses")
        return lesson
