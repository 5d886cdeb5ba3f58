# app/models/lesson.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from app.core.database import Base


class Lesson(Base):
    __tablename__ = "lessons"

    id = Column(String(36), primary_key=True)

    # Basic Info
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    video_url = Column(Text, nullable=True)
    duration = Column(Integer, nullable=True)  # seconds
    is_free = Column(Boolean, default=False, nullable=False)

    # Course relationship
    course_id = Column(String(36), nullable=False, index=True)

    # Order/Position in course
    order_index = Column(Integer, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Lesson(id={self.id}, title='{self.title}', course_id={self.course_id})>"
