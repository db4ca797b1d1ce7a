"""Post service: visibility rules, ownership checks and cascading deletes."""

import logging

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session, joinedload

from blog_api.database import atomic
from blog_api.errors import NotFoundError, UpstreamError
from blog_api.models.category import Category
from blog_api.models.comment import Comment
from blog_api.models.post import Post
from blog_api.models.user import User
from blog_api.schemas.post import PostCreate, PostUpdate
from blog_api.services.images import ImageService
from blog_api.services.permissions import Operation, authorize, can_view_draft
from blog_api.validation import (
    TITLE_MAX_LENGTH,
    require_text,
    validate_image_url,
    validate_post_fields,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class PostService:
    """Service for post-related operations."""

    def __init__(self, db: Session, images: ImageService | None = None):
        self.db = db
        self.images = images

    def _visible_to(self, viewer: User | None) -> Query:
        """Posts the viewer may read: published ones, plus own drafts (all drafts for admins)."""
        query = self.db.query(Post).options(joinedload(Post.author))
        if viewer is None:
            return query.filter(Post.published.is_(True))
        if viewer.is_admin:
            return query
        return query.filter(or_(Post.published.is_(True), Post.author_id == viewer.id))

    def _get(self, post_id: int) -> Post:
        post = self.db.query(Post).filter(Post.id == post_id).first()
        if not post:
            raise NotFoundError("Post not found")
        return post

    def _ensure_category(self, category_id: int | None) -> None:
        if category_id is None:
            return
        if not self.db.query(Category.id).filter(Category.id == category_id).first():
            raise NotFoundError(f"Category {category_id} not found")

    def list_posts(
        self,
        viewer: User | None,
        published: bool | None = None,
        category_id: int | None = None,
        author_id: int | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> list[Post]:
        """List posts visible to the viewer, newest first.

        ``published=True`` restricts to published posts, ``False`` to the
        drafts the viewer can see, and None returns both.
        """
        authorize(Operation.READ_POSTS, viewer)
        query = self._visible_to(viewer)
        if published is not None:
            query = query.filter(Post.published.is_(published))
        if category_id is not None:
            query = query.filter(Post.category_id == category_id)
        if author_id is not None:
            query = query.filter(Post.author_id == author_id)

        limit = max(1, min(limit, MAX_PAGE_SIZE))
        return (
            query.order_by(Post.created_at.desc(), Post.id.desc())
            .offset(max(offset, 0))
            .limit(limit)
            .all()
        )

    def get_post(self, post_id: int, viewer: User | None) -> Post:
        """Get a post; drafts the viewer may not see are reported as missing."""
        authorize(Operation.READ_POSTS, viewer)
        post = self._get(post_id)
        if not post.published and not can_view_draft(viewer, post.author_id):
            raise NotFoundError("Post not found")
        return post

    def create_post(self, data: PostCreate, author: User) -> Post:
        authorize(Operation.CREATE_POST, author)
        title, content = validate_post_fields(data.title, data.content)
        image_url = validate_image_url(data.image_url)
        self._ensure_category(data.category_id)

        post = Post(
            title=title,
            content=content,
            category_id=data.category_id,
            author_id=author.id,
            image_url=image_url,
            published=data.published,
        )
        with atomic(self.db):
            self.db.add(post)
        self.db.refresh(post)
        logger.info(f"User {author.id} created post {post.id}")
        return post

    def update_post(self, post_id: int, data: PostUpdate, user: User) -> Post:
        """Apply a partial update. Only fields present in the request are changed."""
        post = self._get(post_id)
        authorize(Operation.UPDATE_POST, user, owner_id=post.author_id)

        fields = data.model_fields_set
        changes = {}
        if "title" in fields:
            changes["title"] = require_text(data.title, "title", max_length=TITLE_MAX_LENGTH)
        if "content" in fields:
            changes["content"] = require_text(data.content, "content")
        if "category_id" in fields:
            self._ensure_category(data.category_id)
            changes["category_id"] = data.category_id
        if "image_url" in fields:
            changes["image_url"] = validate_image_url(data.image_url)
        if data.published is not None:
            changes["published"] = data.published

        with atomic(self.db):
            for field, value in changes.items():
                setattr(post, field, value)
        self.db.refresh(post)
        return post

    async def delete_post(self, post_id: int, user: User) -> None:
        """Delete a post and its comments in one transaction.

        A hosted image is removed afterwards; failing to remove it does not
        undo the delete.
        """
        post = self._get(post_id)
        authorize(Operation.DELETE_POST, user, owner_id=post.author_id)
        image_url = post.image_url

        with atomic(self.db):
            removed = self.db.query(Comment).filter(Comment.post_id == post.id).delete()
            self.db.delete(post)
        logger.info(f"User {user.id} deleted post {post_id} and {removed} comments")

        if image_url and self.images is not None:
            await self._discard_image(image_url)

    async def _discard_image(self, image_url: str) -> None:
        try:
            await self.images.delete(image_url)
        except UpstreamError as e:
            logger.warning(f"Could not delete image {image_url}: {e.message}")
