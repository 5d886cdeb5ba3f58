# app/models/category.py
from sqlalchemy import Boolean, Column, DateTime, String, Text

from app.core.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True)

    # Basic Info
    name = Column(String(100), nullable=False)
    name_en = Column(String(100), nullable=False)
    name_fa = Column(String(100), nullable=False)
    slug = Column(String(100), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    icon = Column(String(50), nullable=True)
    color = Column(String(7), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Category(id={self.id}, slug='{self.slug}')>"
