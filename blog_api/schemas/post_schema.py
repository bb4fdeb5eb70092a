from datetime import datetime
from pydantic import BaseModel, Field
from blog_api.models.post import CommunityCategory
from blog_api.schemas.base_schema import CamelModel


class PostBase(CamelModel):
    title: str = Field(min_length=3)
    content: str = Field(min_length=10)
    category: CommunityCategory


class PostCreate(PostBase):
    pass


class PostUpdate(PostBase):
    title: str | None = Field(default=None, min_length=3)
    content: str | None = Field(default=None, min_length=10)
    category: CommunityCategory | None = None


class AuthorSummary(CamelModel):
    id: int
    username: str


class PostComment(CamelModel):
    id: int
    content: str
    post_id: int
    author_id: int
    created_at: datetime
    updated_at: datetime | None
    author: AuthorSummary


class ResponsePost(CamelModel):
    id: int
    title: str
    content: str
    category: CommunityCategory
    author_id: int
    created_at: datetime
    updated_at: datetime | None
    author: AuthorSummary
    comment_count: int = 0


class ResponsePostDetail(ResponsePost):
    comments: list[PostComment] = []


class PageMetadata(BaseModel):
    total: int
    skip: int
    take: int


class PostPage(BaseModel):
    posts: list[ResponsePost]
    metadata: PageMetadata


class CategoryStat(CamelModel):
    category: CommunityCategory
    post_count: int


class MessageResponse(BaseModel):
    message: str
