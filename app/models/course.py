# app/models/course.py
from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Integer,
    Numeric,
    String,
    Text,
)

from app.core.database import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(String(36), primary_key=True)

    # Basic Info
    title = Column(String(255), nullable=False, index=True)
    title_en = Column(String(255), nullable=True)
    title_fa = Column(String(255), nullable=True)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)
    short_description = Column(String(500), nullable=True)
    thumbnail = Column(Text, nullable=True)
    preview_video = Column(Text, nullable=True)

    # Pricing
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    original_price = Column(Numeric(10, 2, asdecimal=False), nullable=True)

    # Classification
    level = Column(String(20), nullable=False, index=True)
    language = Column(String(10), default="en", nullable=False)
    duration = Column(Integer, nullable=True)  # minutes
    tags = Column(JSON, nullable=True)
    requirements = Column(JSON, nullable=True)
    what_you_will_learn = Column(JSON, nullable=True)

    # Ownership (no FK constraints: deletes never cascade)
    instructor_id = Column(String(36), nullable=False, index=True)
    category_id = Column(String(36), nullable=False, index=True)

    # Moderation: draft, pending, published, rejected
    status = Column(String(20), default="draft", nullable=False, index=True)
    is_featured = Column(Boolean, default=False, nullable=False)
    is_published = Column(Boolean, default=False, nullable=False, index=True)
    published_at = Column(DateTime(timezone=True), nullable=True)

    # Statistics
    lessons_count = Column(Integer, default=0, nullable=False)
    students_count = Column(Integer, default=0, nullable=False)
    rating = Column(Numeric(3, 2, asdecimal=False), default=0, nullable=False)
    reviews_count = Column(Integer, default=0, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Course(id={self.id}, title='{self.title}', status={self.status})>"
