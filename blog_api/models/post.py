import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Text, Enum, func, select
from sqlalchemy.orm import relationship, column_property
from blog_api.db.session import Base
from blog_api.models.comment import Comment


class CommunityCategory(str, enum.Enum):
    HISTORY = "HISTORY"
    FOOD = "FOOD"
    PETS = "PETS"
    HEALTH = "HEALTH"
    FASHION = "FASHION"
    EXERCISE = "EXERCISE"
    OTHERS = "OTHERS"


def _utcnow():
    return datetime.now(timezone.utc)


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, index=True, nullable=False)
    content = Column(Text, nullable=False)
    category = Column(Enum(CommunityCategory, name="community_category"), nullable=False, index=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    author = relationship("User", back_populates="posts")
    comments = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=[Comment.created_at.desc(), Comment.id.desc()],
    )

    comment_count = column_property(
        select(func.count(Comment.id))
        .where(Comment.post_id == id)
        .correlate_except(Comment)
        .scalar_subquery()
    )
