from typing import Dict

from pydantic import BaseModel


class PlatformStats(BaseModel):
    total_users: int
    total_courses: int
    total_enrollments: int
    total_revenue: float
    users_by_role: Dict[str, int]
    courses_by_status: Dict[str, int]
