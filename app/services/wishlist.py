from typing import List

from app.core.exceptions import DuplicateEntry, NotFound
from app.schemas.wishlist import WishlistResponse, WishlistWithCourse
from app.services.course import CourseService
from app.storage.base import Storage


class WishlistService:
    def __init__(self, storage: Storage):
        self.storage = storage
        self.courses = CourseService(storage)

    def is_in_wishlist(self, user_id: str, course_id: str) -> bool:
        return (
            self.storage.wishlist.find(user_id=user_id, course_id=course_id) is not None
        )

    def add(self, user_id: str, course_id: str) -> WishlistResponse:
        self.courses.get_course(course_id)
        if self.is_in_wishlist(user_id, course_id):
            raise DuplicateEntry("Course already in wishlist")
        return self.storage.wishlist.create({"user_id": user_id, "course_id": course_id})

    def remove(self, user_id: str, course_id: str) -> None:
        entry = self.storage.wishlist.find(user_id=user_id, course_id=course_id)
        if not entry:
            raise NotFound("Course not found in wishlist")
        self.storage.wishlist.delete(entry.id)

    def get_user_wishlist(self, user_id: str) -> List[WishlistWithCourse]:
        """Wishlist entries, newest first, with the course embedded"""
        return [
            WishlistWithCourse(
                **entry.model_dump(), course=self.storage.courses.get(entry.course_id)
            )
            for entry in self.storage.wishlist.list(filters={"user_id": user_id})
        ]
