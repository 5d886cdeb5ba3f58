# app/services/blog.py
import logging
from typing import List, Optional

from app.core.exceptions import AuthorizationDenied, DuplicateEntry, NotFound
from app.schemas.blog import (
    BlogPostCreate,
    BlogPostDetailResponse,
    BlogPostResponse,
    BlogPostUpdate,
    CommentCreate,
    CommentResponse,
    CommentWithUser,
)
from app.schemas.user import UserInDB
from app.services.user import to_public
from app.storage.base import Storage, utcnow
from app.utils.text import unique_slug

logger = logging.getLogger(__name__)


class BlogService:
    def __init__(self, storage: Storage):
        self.storage = storage

    # ---------- posts ----------

    def create_post(self, post_in: BlogPostCreate, author: UserInDB) -> BlogPostResponse:
        """Create a blog post (admin only)"""
        data = post_in.model_dump()
        if data.get("slug"):
            if self.storage.blog_posts.find(slug=data["slug"]):
                raise DuplicateEntry("Blog post with this slug already exists")
        else:
            data["slug"] = unique_slug(
                post_in.title,
                lambda s: self.storage.blog_posts.find(slug=s) is not None,
            )

        data["author_id"] = author.id
        if post_in.is_published:
            data["published_at"] = utcnow()

        post = self.storage.blog_posts.create(data)
        logger.info(f"Blog post created: {post.slug}")
        return post

    def get_post(self, post_id: str) -> BlogPostResponse:
        post = self.storage.blog_posts.get(post_id)
        if not post:
            raise NotFound("Blog post not found")
        return post

    def get_posts(
        self,
        author_id: Optional[str] = None,
        category_id: Optional[str] = None,
        is_published: Optional[bool] = None,
        is_featured: Optional[bool] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[BlogPostResponse]:
        filters = {
            "author_id": author_id,
            "category_id": category_id,
            "is_published": is_published,
            "is_featured": is_featured,
        }
        return self.storage.blog_posts.list(
            filters=filters, search=search, offset=offset, limit=limit
        )

    def view_post(self, post_id: str) -> BlogPostDetailResponse:
        """Post with author and published comments; counts as one view"""
        post = self.get_post(post_id)
        post = self.storage.blog_posts.update(
            post_id, {"views_count": post.views_count + 1}
        )

        return BlogPostDetailResponse(
            **post.model_dump(),
            author=to_public(self.storage.users.get(post.author_id)),
            comments=self.get_comments(post_id),
        )

    def update_post(self, post_id: str, post_in: BlogPostUpdate) -> BlogPostResponse:
        post = self.get_post(post_id)
        changes = post_in.model_dump(exclude_unset=True)
        changes = {k: v for k, v in changes.items() if v is not None}

        slug = changes.get("slug")
        if slug and slug != post.slug and self.storage.blog_posts.find(slug=slug):
            raise DuplicateEntry("Blog post with this slug already exists")
        if changes.get("is_published") and post.published_at is None:
            changes["published_at"] = utcnow()

        return self.storage.blog_posts.update(post_id, changes)

    def delete_post(self, post_id: str) -> None:
        if not self.storage.blog_posts.delete(post_id):
            raise NotFound("Blog post not found")
        logger.info(f"Blog post deleted: {post_id}")

    # ---------- comments ----------

    def get_comments(self, post_id: str) -> List[CommentWithUser]:
        """Published comments, oldest first"""
        return [
            CommentWithUser(
                **comment.model_dump(),
                user=to_public(self.storage.users.get(comment.user_id)),
            )
            for comment in self.storage.comments.list(
                filters={"blog_post_id": post_id, "is_published": True}
            )
        ]

    def create_comment(
        self, post_id: str, comment_in: CommentCreate, user: UserInDB
    ) -> CommentResponse:
        self.get_post(post_id)

        if comment_in.parent_id:
            parent = self.storage.comments.get(comment_in.parent_id)
            if not parent or parent.blog_post_id != post_id:
                raise NotFound("Parent comment not found")

        return self.storage.comments.create(
            {**comment_in.model_dump(), "user_id": user.id, "blog_post_id": post_id}
        )

    def delete_comment(self, comment_id: str, user: UserInDB) -> None:
        comment = self.storage.comments.get(comment_id)
        if not comment:
            raise NotFound("Comment not found")
        if comment.user_id != user.id and user.role != "admin":
            raise AuthorizationDenied("You can only delete your own comments")

        self.storage.comments.delete(comment_id)
