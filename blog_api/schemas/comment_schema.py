from datetime import datetime
from pydantic import Field
from blog_api.schemas.base_schema import CamelModel


class CommentCreate(CamelModel):
    content: str = Field(min_length=1)
    post_id: int
    author_id: int


class CommentUpdate(CamelModel):
    content: str | None = Field(default=None, min_length=1)


class CommentAuthor(CamelModel):
    id: int
    name: str


class ResponseComment(CamelModel):
    id: int
    content: str
    post_id: int
    author_id: int
    created_at: datetime
    updated_at: datetime | None
    author: CommentAuthor
