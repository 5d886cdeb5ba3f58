# app/models/comment.py
from sqlalchemy import Boolean, Column, DateTime, String, Text

from app.core.database import Base


class Comment(Base):
    __tablename__ = "comments"

    id = Column(String(36), primary_key=True)

    user_id = Column(String(36), nullable=False, index=True)
    blog_post_id = Column(String(36), nullable=False, index=True)
    parent_id = Column(String(36), nullable=True)  # For nested replies

    # Content
    content = Column(Text, nullable=False)
    is_published = Column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Comment(id={self.id}, blog_post_id={self.blog_post_id}, user_id={self.user_id})>"
