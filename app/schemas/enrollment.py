# app/schemas/enrollment.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.course import CourseResponse

ENROLLMENT_STATUS_PATTERN = "^(active|completed|dropped)$"

# ==================== Enrollment Schemas ====================


class EnrollmentUpdate(BaseModel):
    """Progress reported by the learner (or corrected by an admin)"""

    progress: Optional[int] = Field(None, ge=0, le=100)
    status: Optional[str] = Field(None, pattern=ENROLLMENT_STATUS_PATTERN)
    completed_lessons: Optional[List[str]] = None


class EnrollmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    course_id: str
    status: str = Field(default="active", pattern=ENROLLMENT_STATUS_PATTERN)
    progress: int = Field(default=0, ge=0, le=100)
    completed_lessons: List[str] = []
    certificate_issued: bool = False
    enrolled_at: datetime
    completed_at: Optional[datetime] = None


class EnrollmentWithCourse(EnrollmentResponse):
    course: Optional[CourseResponse] = None
