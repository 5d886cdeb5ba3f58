from collections import Counter

from app.schemas.admin import PlatformStats
from app.storage.base import Storage


class AdminService:
    def __init__(self, storage: Storage):
        self.storage = storage

    def get_stats(self) -> PlatformStats:
        """Platform totals for the admin dashboard"""
        users = self.storage.users.list()
        courses = self.storage.courses.list()
        completed = self.storage.payments.list(filters={"status": "completed"})

        return PlatformStats(
            total_users=len(users),
            total_courses=len(courses),
            total_enrollments=self.storage.enrollments.count(),
            total_revenue=round(sum(p.amount for p in completed), 2),
            users_by_role=dict(Counter(u.role for u in users)),
            courses_by_status=dict(Counter(c.status for c in courses)),
        )
