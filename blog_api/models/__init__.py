# Import every model so the mappers are registered before first use
from blog_api.models.user import User
from blog_api.models.session import UserSession
from blog_api.models.comment import Comment
from blog_api.models.post import Post, CommunityCategory

__all__ = ["User", "UserSession", "Comment", "Post", "CommunityCategory"]
