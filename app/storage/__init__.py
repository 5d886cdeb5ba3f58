"""
Entity store: one repository per entity, in-memory or relational backend.
"""

import logging

from app.core.config import Settings
from app.storage.base import Repository, Storage
from app.storage.memory import MemStorage

logger = logging.getLogger(__name__)


def create_storage(settings: Settings) -> Storage:
    """Build the backend selected by ``settings.storage_driver``."""
    if settings.storage_driver == "database":
        # Imported lazily so the memory driver never touches SQLAlchemy engines
        from app.storage.sql import SqlStorage

        logger.info("Using relational storage")
        return SqlStorage(settings.sqlalchemy_url, create=True)

    logger.info("Using in-memory storage")
    return MemStorage()


__all__ = ["MemStorage", "Repository", "Storage", "create_storage"]
