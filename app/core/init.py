"""
Application initialization module
Handles initial setup tasks like seeding default categories and the admin account
"""

import logging

from app.core.config import settings
from app.core.security import PasswordHelper
from app.storage.base import Storage

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    {
        "name": "Programming",
        "name_en": "Programming",
        "name_fa": "برنامه‌نویسی",
        "slug": "programming",
        "description": "Software development, web and mobile programming",
        "icon": "code",
        "color": "#3B82F6",
    },
    {
        "name": "Business",
        "name_en": "Business",
        "name_fa": "کسب و کار",
        "slug": "business",
        "description": "Entrepreneurship, marketing and management",
        "icon": "briefcase",
        "color": "#10B981",
    },
    {
        "name": "Design",
        "name_en": "Design",
        "name_fa": "طراحی",
        "slug": "design",
        "description": "Graphic, UI and UX design",
        "icon": "palette",
        "color": "#F59E0B",
    },
]


def init_default_categories(storage: Storage) -> None:
    """Create the default categories that are missing (matched by slug)."""
    created = 0
    for category in DEFAULT_CATEGORIES:
        if storage.categories.find(slug=category["slug"]):
            continue
        storage.categories.create(category)
        created += 1

    if created:
        logger.info(f"✅ Seeded {created} default categories")


def init_admin(storage: Storage) -> None:
    """
    Initialize the admin user if no admin exists.

    Credentials come from settings (ADMIN_DEFAULT_*).
    """
    existing_admin = storage.users.find(role="admin")
    if existing_admin:
        logger.info(f"✅ Admin user already exists (Username: {existing_admin.username})")
        return

    admin = storage.users.create(
        {
            "username": settings.admin_default_username,
            "email": settings.admin_default_email,
            "password": PasswordHelper.hash_password(settings.admin_default_password),
            "first_name": "Platform",
            "last_name": "Admin",
            "role": "admin",
            "email_verified": True,
        }
    )

    logger.info("=" * 60)
    logger.info("🎉 ADMIN ACCOUNT CREATED")
    logger.info(f"Username: {admin.username}")
    logger.info(f"Email: {admin.email}")
    logger.info("=" * 60)
    logger.warning("⚠️  IMPORTANT: Change the default password immediately!")


def initialize_application(storage: Storage) -> None:
    """
    Run all application initialization tasks.

    Args:
        storage: Entity store the application serves from
    """
    logger.info("🚀 Starting application initialization...")

    if settings.seed_demo_data:
        init_default_categories(storage)
    init_admin(storage)

    logger.info("✅ Application initialization completed!")
