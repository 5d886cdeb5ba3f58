# app/models/blog_post.py
from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text

from app.core.database import Base


class BlogPost(Base):
    __tablename__ = "blog_posts"

    id = Column(String(36), primary_key=True)

    # Content
    title = Column(String(255), nullable=False)
    title_en = Column(String(255), nullable=True)
    title_fa = Column(String(255), nullable=True)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    excerpt = Column(String(1000), nullable=True)
    content = Column(Text, nullable=False)
    thumbnail = Column(Text, nullable=True)
    tags = Column(JSON, nullable=True)

    author_id = Column(String(36), nullable=False, index=True)
    category_id = Column(String(36), nullable=True, index=True)

    # Post Settings
    is_published = Column(Boolean, default=False, nullable=False, index=True)
    is_featured = Column(Boolean, default=False, nullable=False)

    # Statistics
    views_count = Column(Integer, default=0, nullable=False)

    # Timestamps
    published_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<BlogPost(id={self.id}, slug='{self.slug}')>"
