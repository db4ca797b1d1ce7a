"""Comment service."""

import logging

from sqlalchemy.orm import Session, joinedload

from blog_api.database import atomic
from blog_api.errors import NotFoundError
from blog_api.models.comment import Comment
from blog_api.models.user import User
from blog_api.schemas.comment import CommentCreate, CommentUpdate
from blog_api.services.permissions import Operation, authorize
from blog_api.services.posts import PostService
from blog_api.validation import validate_comment_content

logger = logging.getLogger(__name__)


class CommentService:
    """Service for comment-related operations.

    Comments can only be read or written on posts the caller can see.
    """

    def __init__(self, db: Session, posts: PostService):
        self.db = db
        self.posts = posts

    def _get(self, comment_id: int) -> Comment:
        comment = self.db.query(Comment).filter(Comment.id == comment_id).first()
        if not comment:
            raise NotFoundError("Comment not found")
        return comment

    def list_comments(self, post_id: int, viewer: User | None) -> list[Comment]:
        """List a post's comments, oldest first."""
        authorize(Operation.READ_COMMENTS, viewer)
        post = self.posts.get_post(post_id, viewer)
        return (
            self.db.query(Comment)
            .options(joinedload(Comment.author))
            .filter(Comment.post_id == post.id)
            .order_by(Comment.created_at, Comment.id)
            .all()
        )

    def create_comment(self, post_id: int, data: CommentCreate, author: User) -> Comment:
        authorize(Operation.CREATE_COMMENT, author)
        content = validate_comment_content(data.content)
        post = self.posts.get_post(post_id, author)

        comment = Comment(content=content, post_id=post.id, author_id=author.id)
        with atomic(self.db):
            self.db.add(comment)
        self.db.refresh(comment)
        logger.info(f"User {author.id} commented on post {post.id}")
        return comment

    def update_comment(self, comment_id: int, data: CommentUpdate, user: User) -> Comment:
        comment = self._get(comment_id)
        authorize(Operation.UPDATE_COMMENT, user, owner_id=comment.author_id)
        content = validate_comment_content(data.content)

        with atomic(self.db):
            comment.content = content
        self.db.refresh(comment)
        return comment

    def delete_comment(self, comment_id: int, user: User) -> None:
        comment = self._get(comment_id)
        authorize(Operation.DELETE_COMMENT, user, owner_id=comment.author_id)

        with atomic(self.db):
            self.db.delete(comment)
        logger.info(f"User {user.id} deleted comment {comment_id}")
