from fastapi import APIRouter, Depends, Query, status
from blog_api.core.deps import get_current_user, get_post_service
from blog_api.core.security import TokenIdentity
from blog_api.models.post import CommunityCategory
from blog_api.schemas.post_schema import (
    PostCreate, PostUpdate, ResponsePost, ResponsePostDetail, PostPage, CategoryStat, MessageResponse,
)
from blog_api.services.post import PostService, PostFilter

router = APIRouter(prefix="/posts", tags=["posts"])


# List posts
@router.get("", response_model=PostPage)
def get_all_posts(
    category: CommunityCategory | None = None,
    author_id: int | None = Query(None, alias="authorId"),
    search_term: str | None = Query(None, alias="searchTerm"),
    skip: int = Query(0, ge=0),
    take: int = Query(10, ge=1, le=100),
    service: PostService = Depends(get_post_service),
):
    return service.find_all(PostFilter(
        category=category,
        author_id=author_id,
        search_term=search_term,
        skip=skip,
        take=take,
    ))


# Post counts per category
@router.get("/stats/categories", response_model=list[CategoryStat])
def get_category_stats(service: PostService = Depends(get_post_service)):
    return service.get_category_stats()


# Posts of one category
@router.get("/category/{category}", response_model=list[ResponsePost])
def get_posts_by_category(category: CommunityCategory, service: PostService = Depends(get_post_service)):
    return service.get_posts_by_category(category)


# Create a new post
@router.post("", response_model=ResponsePostDetail, status_code=status.HTTP_201_CREATED)
def create_post(post: PostCreate,
                current_user: TokenIdentity = Depends(get_current_user),
                service: PostService = Depends(get_post_service)):
    return service.create(current_user.id, post)


# Get a post by id
@router.get("/{post_id}", response_model=ResponsePostDetail)
def get_post(post_id: int, service: PostService = Depends(get_post_service)):
    return service.find_one(post_id)


# Update, owner only
@router.put("/{post_id}", response_model=ResponsePostDetail)
def update_post(post_id: int, post_data: PostUpdate,
                current_user: TokenIdentity = Depends(get_current_user),
                service: PostService = Depends(get_post_service)):
    return service.update(post_id, current_user.id, post_data)


# Delete, owner only
@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(post_id: int,
                current_user: TokenIdentity = Depends(get_current_user),
                service: PostService = Depends(get_post_service)):
    return service.remove(post_id, current_user.id)
