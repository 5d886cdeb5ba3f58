# app/services/category.py
import logging
from typing import List

from app.core.exceptions import DuplicateEntry, NotFound
from app.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from app.storage.base import Storage

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, storage: Storage):
        self.storage = storage

    def create_category(self, category_in: CategoryCreate) -> CategoryResponse:
        """Create a new category (admin only)"""
        if self.storage.categories.find(slug=category_in.slug):
            raise DuplicateEntry("Category with this slug already exists")

        category = self.storage.categories.create(category_in.model_dump())
        logger.info(f"Category created: {category.slug}")
        return category

    def get_categories(self) -> List[CategoryResponse]:
        """Active categories, in creation order"""
        return self.storage.categories.list(filters={"is_active": True})

    def get_category(self, category_id: str) -> CategoryResponse:
        category = self.storage.categories.get(category_id)
        if not category:
            raise NotFound("Category not found")
        return category

    def update_category(
        self, category_id: str, category_in: CategoryUpdate
    ) -> CategoryResponse:
        """Update a category (admin only)"""
        category = self.get_category(category_id)
        changes = category_in.model_dump(exclude_unset=True)

        slug = changes.get("slug")
        if slug and slug != category.slug and self.storage.categories.find(slug=slug):
            raise DuplicateEntry("Category with this slug already exists")

        return self.storage.categories.update(category_id, changes)

    def delete_category(self, category_id: str) -> None:
        """Delete a category (admin only). Courses keep their category_id."""
        if not self.storage.categories.delete(category_id):
            raise NotFound("Category not found")
        logger.info(f"Category deleted: {category_id}")
