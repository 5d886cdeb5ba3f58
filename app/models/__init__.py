"""
Models package initialization
Import all models so they register on Base.metadata

References between tables are plain indexed id columns without foreign key
constraints: deletes never cascade and never fail because of child rows.
"""

from .blog_post import BlogPost
from .category import Category
from .comment import Comment
from .course import Course
from .enrollment import Enrollment
from .lesson import Lesson
from .payment import Payment
from .review import Review
from .user import User
from .wishlist import Wishlist

# Make models available at package level
__all__ = [
    "BlogPost",
    "Category",
    "Comment",
    "Course",
    "Enrollment",
    "Lesson",
    "Payment",
    "Review",
    "User",
    "Wishlist",
]
