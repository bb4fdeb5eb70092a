from datetime import datetime
from pydantic import EmailStr, Field
from blog_api.schemas.base_schema import CamelModel


class SignUpRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)
    name: str = Field(min_length=2)
    username: str = Field(min_length=3)


class SignInRequest(CamelModel):
    email: EmailStr
    password: str


class UserResponse(CamelModel):
    id: int
    email: str
    name: str
    username: str
    created_at: datetime | None = None


class AuthResponse(CamelModel):
    user: UserResponse
    token: str


class SignOutResponse(CamelModel):
    success: bool
    message: str
    timestamp: str
