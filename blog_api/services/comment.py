from dataclasses import dataclass
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from blog_api.core.exceptions import NotFoundError
from blog_api.models.comment import Comment
from blog_api.schemas.comment_schema import CommentCreate, CommentUpdate, ResponseComment
import logging


@dataclass
class CommentFilter:
    skip: int | None = None
    take: int | None = None
    post_id: int | None = None
    author_id: int | None = None
    order: str = "desc"


class CommentService:
    """Comment CRUD. Update and delete do not check authorship."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Comment).options(joinedload(Comment.author))

    def comment(self, comment_id: int) -> Comment | None:
        return self._query().filter(Comment.id == comment_id).first()

    def comments(self, params: CommentFilter | None = None) -> list[Comment]:
        params = params or CommentFilter()
        query = self._query()
        if params.post_id is not None:
            query = query.filter(Comment.post_id == params.post_id)
        if params.author_id is not None:
            query = query.filter(Comment.author_id == params.author_id)
        if params.order == "asc":
            query = query.order_by(Comment.created_at.asc(), Comment.id.asc())
        else:
            query = query.order_by(Comment.created_at.desc(), Comment.id.desc())
        if params.skip:
            query = query.offset(params.skip)
        if params.take is not None:
            query = query.limit(params.take)
        return query.all()

    def get_comments_by_post_id(self, post_id: int) -> list[Comment]:
        return self.comments(CommentFilter(post_id=post_id))

    def create(self, data: CommentCreate) -> Comment:
        new_comment = Comment(
            content=data.content,
            post_id=data.post_id,
            author_id=data.author_id,
        )
        self.db.add(new_comment)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logging.debug(
                f"Comment rejected: post {data.post_id} or author {data.author_id} missing")
            raise NotFoundError("Post or author not found")
        return self.comment(new_comment.id)

    def update(self, comment_id: int, data: CommentUpdate) -> Comment:
        comment = self.db.query(Comment).filter(Comment.id == comment_id).first()
        if not comment:
            raise NotFoundError(f"Comment with ID {comment_id} not found")
        for key, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(comment, key, value)
        self.db.commit()
        return self.comment(comment_id)

    def remove(self, comment_id: int) -> ResponseComment:
        comment = self.comment(comment_id)
        if not comment:
            raise NotFoundError(f"Comment with ID {comment_id} not found")
        # Snapshot before the row disappears
        removed = ResponseComment.model_validate(comment)
        self.db.delete(comment)
        self.db.commit()
        return removed
