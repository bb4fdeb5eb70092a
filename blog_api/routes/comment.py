from typing import Literal
from fastapi import APIRouter, Depends, Query, status
from blog_api.core.deps import get_current_user, get_comment_service
from blog_api.core.exceptions import NotFoundError
from blog_api.core.security import TokenIdentity
from blog_api.schemas.comment_schema import CommentCreate, CommentUpdate, ResponseComment
from blog_api.services.comment import CommentService, CommentFilter

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("/post/{post_id}", response_model=list[ResponseComment])
def get_comments_by_post_id(post_id: int, service: CommentService = Depends(get_comment_service)):
    return service.get_comments_by_post_id(post_id)


# authorId comes from the body, not from the token
@router.post("", response_model=ResponseComment, status_code=status.HTTP_201_CREATED)
def create_comment(comment: CommentCreate,
                   current_user: TokenIdentity = Depends(get_current_user),
                   service: CommentService = Depends(get_comment_service)):
    return service.create(comment)


@router.get("", response_model=list[ResponseComment])
def get_all_comments(
    post_id: int | None = Query(None, alias="postId"),
    author_id: int | None = Query(None, alias="authorId"),
    skip: int | None = Query(None, ge=0),
    take: int | None = Query(None, ge=1),
    order: Literal["asc", "desc"] = "desc",
    service: CommentService = Depends(get_comment_service),
):
    return service.comments(CommentFilter(
        skip=skip, take=take, post_id=post_id, author_id=author_id, order=order))


@router.get("/{comment_id}", response_model=ResponseComment)
def get_comment(comment_id: int, service: CommentService = Depends(get_comment_service)):
    comment = service.comment(comment_id)
    if comment is None:
        raise NotFoundError(f"Comment with ID {comment_id} not found")
    return comment


@router.patch("/{comment_id}", response_model=ResponseComment)
def update_comment(comment_id: int, comment_data: CommentUpdate,
                   current_user: TokenIdentity = Depends(get_current_user),
                   service: CommentService = Depends(get_comment_service)):
    return service.update(comment_id, comment_data)


@router.delete("/{comment_id}", response_model=ResponseComment)
def delete_comment(comment_id: int,
                   current_user: TokenIdentity = Depends(get_current_user),
                   service: CommentService = Depends(get_comment_service)):
    return service.remove(comment_id)
