# app/routers/category.py
from typing import List

from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_current_admin, get_storage
from app.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from app.schemas.user import UserInDB
from app.services.category import CategoryService
from app.storage.base import Storage

router = APIRouter(
    prefix="/api/categories",
    tags=["Categories"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[CategoryResponse])
def get_categories(storage: Storage = Depends(get_storage)):
    """Get all active categories"""
    return CategoryService(storage).get_categories()


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: str, storage: Storage = Depends(get_storage)):
    return CategoryService(storage).get_category(category_id)


# ==================== Admin Endpoints ====================


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    category_in: CategoryCreate,
    storage: Storage = Depends(get_storage),
    current_admin: UserInDB = Depends(get_current_admin),
):
    """Create a new category (admin only)"""
    return CategoryService(storage).create_category(category_in)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: str,
    category_in: CategoryUpdate,
    storage: Storage = Depends(get_storage),
    current_admin: UserInDB = Depends(get_current_admin),
):
    return CategoryService(storage).update_category(category_id, category_in)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: str,
    storage: Storage = Depends(get_storage),
    current_admin: UserInDB = Depends(get_current_admin),
):
    CategoryService(storage).delete_category(category_id)
