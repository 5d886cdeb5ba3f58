# app/models/enrollment.py
from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Integer,
    String,
    UniqueConstraint,
)

from app.core.database import Base


class Enrollment(Base):
    """
    Links a user to a course with progress tracking.
    One row per (user, course).
    """

    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name="uq_enrollment_user_course"),
    )

    id = Column(String(36), primary_key=True)

    # User and Course relationship
    user_id = Column(String(36), nullable=False, index=True)
    course_id = Column(String(36), nullable=False, index=True)

    # active, completed, dropped
    status = Column(String(20), default="active", nullable=False)

    # Progress tracking
    progress = Column(Integer, default=0, nullable=False)  # percentage 0-100
    completed_lessons = Column(JSON, nullable=False, default=list)
    certificate_issued = Column(Boolean, default=False, nullable=False)

    # Timestamps
    enrolled_at = Column(DateTime(timezone=True), nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<Enrollment(id={self.id}, user_id={self.user_id}, course_id={self.course_id}, status={self.status})>"
