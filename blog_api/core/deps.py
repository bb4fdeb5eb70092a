from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from blog_api.core.exceptions import UnauthorizedError
from blog_api.core.security import CredentialService, TokenIdentity, get_credential_service
from blog_api.db.session import get_db
from blog_api.services.auth import AuthService
from blog_api.services.comment import CommentService
from blog_api.services.post import PostService
from blog_api.services.session_registry import SessionRegistry

# auto_error=False: the guard raises its own 401 for a missing header
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    credential_service: CredentialService = Depends(get_credential_service),
) -> TokenIdentity:
    """Resolve the bearer token of a protected request to the caller identity."""
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise UnauthorizedError("Missing bearer token")
    return credential_service.verify_token(credentials.credentials)


def get_auth_service(
    db: Session = Depends(get_db),
    credential_service: CredentialService = Depends(get_credential_service),
) -> AuthService:
    return AuthService(db, credential_service, SessionRegistry(db))


def get_post_service(db: Session = Depends(get_db)) -> PostService:
    return PostService(db)


def get_comment_service(db: Session = Depends(get_db)) -> CommentService:
    return CommentService(db)
