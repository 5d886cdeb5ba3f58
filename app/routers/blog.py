from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.core.config import settings
from app.core.dependencies import get_current_admin, get_current_user, get_storage
from app.schemas.blog import (
    BlogPostCreate,
    BlogPostDetailResponse,
    BlogPostResponse,
    BlogPostUpdate,
    CommentCreate,
    CommentResponse,
)
from app.schemas.user import UserInDB
from app.services.blog import BlogService
from app.storage.base import Storage

router = APIRouter(prefix="/api", tags=["Blog"])


# ==================== Posts ====================


@router.get("/blog/posts", response_model=List[BlogPostResponse])
def get_posts(
    author_id: Optional[str] = Query(None),
    category_id: Optional[str] = Query(None),
    is_published: Optional[bool] = Query(None),
    is_featured: Optional[bool] = Query(None),
    search: Optional[str] = Query(None, description="Search title and content"),
    offset: int = Query(0, ge=0),
    limit: int = Query(settings.blog_page_size, ge=1, le=settings.max_page_size),
    storage: Storage = Depends(get_storage),
):
    """Blog posts, newest first"""
    return BlogService(storage).get_posts(
        author_id=author_id,
        category_id=category_id,
        is_published=is_published,
        is_featured=is_featured,
        search=search,
        offset=offset,
        limit=limit,
    )


@router.get("/blog/posts/{post_id}", response_model=BlogPostDetailResponse)
def get_post(post_id: str, storage: Storage = Depends(get_storage)):
    """Post with author and comments. Each call counts as a view."""
    return BlogService(storage).view_post(post_id)


@router.post(
    "/blog/posts", response_model=BlogPostResponse, status_code=status.HTTP_201_CREATED
)
def create_post(
    post_in: BlogPostCreate,
    storage: Storage = Depends(get_storage),
    current_admin: UserInDB = Depends(get_current_admin),
):
    return BlogService(storage).create_post(post_in, current_admin)


@router.put("/blog/posts/{post_id}", response_model=BlogPostResponse)
def update_post(
    post_id: str,
    post_in: BlogPostUpdate,
    storage: Storage = Depends(get_storage),
    current_admin: UserInDB = Depends(get_current_admin),
):
    return BlogService(storage).update_post(post_id, post_in)


@router.delete("/blog/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: str,
    storage: Storage = Depends(get_storage),
    current_admin: UserInDB = Depends(get_current_admin),
):
    BlogService(storage).delete_post(post_id)


# ==================== Comments ====================


@router.post(
    "/blog/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_comment(
    post_id: str,
    comment_in: CommentCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    return BlogService(storage).create_comment(post_id, comment_in, current_user)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    comment_id: str,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
):
    """Delete a comment (its author or an admin)"""
    BlogService(storage).delete_comment(comment_id, current_user)
