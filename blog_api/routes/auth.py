from fastapi import APIRouter, Depends, status
from blog_api.schemas.auth_schema import SignUpRequest, SignInRequest, AuthResponse, SignOutResponse
from blog_api.services.auth import AuthService
from blog_api.core.deps import get_auth_service, get_current_user
from blog_api.core.security import TokenIdentity

router = APIRouter()


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def sign_up(data: SignUpRequest, service: AuthService = Depends(get_auth_service)):
    return service.sign_up(data)


@router.post("/signin", response_model=AuthResponse)
def sign_in(data: SignInRequest, service: AuthService = Depends(get_auth_service)):
    return service.sign_in(data)


@router.post("/signout", response_model=SignOutResponse)
def sign_out(current_user: TokenIdentity = Depends(get_current_user),
             service: AuthService = Depends(get_auth_service)):
    return service.sign_out(current_user.id)
