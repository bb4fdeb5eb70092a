import logging
from dataclasses import dataclass
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload, selectinload
from blog_api.core.exceptions import NotFoundError, ForbiddenError
from blog_api.models.comment import Comment
from blog_api.models.post import Post, CommunityCategory
from blog_api.schemas.post_schema import PostCreate, PostUpdate


@dataclass
class PostFilter:
    category: CommunityCategory | None = None
    author_id: int | None = None
    search_term: str | None = None
    skip: int = 0
    take: int = 10


class PostService:
    """Post listing, lookup and owner-only mutation."""

    def __init__(self, db: Session):
        self.db = db

    def _listing_query(self):
        return self.db.query(Post).options(joinedload(Post.author))

    def _detail_query(self):
        return self._listing_query().options(
            selectinload(Post.comments).joinedload(Comment.author))

    @staticmethod
    def _newest_first(query):
        return query.order_by(Post.created_at.desc(), Post.id.desc())

    def create(self, author_id: int, data: PostCreate) -> Post:
        new_post = Post(
            title=data.title,
            content=data.content,
            category=data.category,
            author_id=author_id,
        )
        self.db.add(new_post)
        self.db.commit()
        logging.debug(f"User {author_id} created post {new_post.id}")
        return self.find_one(new_post.id)

    def find_all(self, params: PostFilter) -> dict:
        filters = []
        if params.category is not None:
            filters.append(Post.category == params.category)
        if params.author_id is not None:
            filters.append(Post.author_id == params.author_id)
        if params.search_term:
            filters.append(or_(
                Post.title.icontains(params.search_term, autoescape=True),
                Post.content.icontains(params.search_term, autoescape=True),
            ))

        total = self.db.query(Post).filter(*filters).count()
        posts = (
            self._newest_first(self._listing_query().filter(*filters))
            .offset(params.skip)
            .limit(params.take)
            .all()
        )
        return {
            "posts": posts,
            "metadata": {"total": total, "skip": params.skip, "take": params.take},
        }

    def find_one(self, post_id: int) -> Post:
        post = self._detail_query().filter(Post.id == post_id).first()
        if not post:
            raise NotFoundError(f"Post with ID {post_id} not found")
        return post

    def _owned_post(self, post_id: int, caller_id: int, action: str) -> Post:
        post = self.db.query(Post).filter(Post.id == post_id).first()
        if not post:
            raise NotFoundError(f"Post with ID {post_id} not found")
        if post.author_id != caller_id:
            raise ForbiddenError(f"You can only {action} your own posts")
        return post

    def update(self, post_id: int, caller_id: int, data: PostUpdate) -> Post:
        post = self._owned_post(post_id, caller_id, "edit")
        for key, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(post, key, value)
        self.db.commit()
        return self.find_one(post_id)

    def remove(self, post_id: int, caller_id: int) -> dict:
        post = self._owned_post(post_id, caller_id, "delete")
        self.db.delete(post)
        self.db.commit()
        logging.debug(f"User {caller_id} deleted post {post_id}")
        return {"message": "Post deleted successfully"}

    def get_posts_by_category(self, category: CommunityCategory) -> list[Post]:
        return self._newest_first(
            self._listing_query().filter(Post.category == category)).all()

    def get_category_stats(self) -> list[dict]:
        rows = (
            self.db.query(Post.category, func.count(Post.id))
            .group_by(Post.category)
            .all()
        )
        return [{"category": category, "post_count": count} for category, count in rows]
