# app/models/wishlist.py
from sqlalchemy import Column, DateTime, String, UniqueConstraint

from app.core.database import Base


class Wishlist(Base):
    __tablename__ = "wishlist"
    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name="uq_wishlist_user_course"),
    )

    id = Column(String(36), primary_key=True)

    user_id = Column(String(36), nullable=False, index=True)
    course_id = Column(String(36), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Wishlist(id={self.id}, user_id={self.user_id}, course_id={self.course_id})>"
