from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from blog_api.schemas.auth_schema import SignUpRequest, SignInRequest
from blog_api.models.user import User
from blog_api.core.exceptions import ConflictError, UnauthorizedError
from blog_api.core.security import CredentialService
from blog_api.services.session_registry import SessionRegistry
import logging


class AuthService:
    def __init__(self, db: Session, credentials: CredentialService, sessions: SessionRegistry):
        self.db = db
        self.credentials = credentials
        self.sessions = sessions

    def sign_up(self, data: SignUpRequest) -> dict:
        logging.debug(f"Registering user: {data.email} ({data.username})")
        # Check if the email or username is already taken
        existing_user = (
            self.db.query(User)
            .filter(or_(User.email == data.email, User.username == data.username))
            .first()
        )
        if existing_user:
            raise ConflictError("Email or username already exists")

        new_user = User(
            email=data.email,
            username=data.username,
            name=data.name,
            password=self.credentials.hash_password(data.password),
        )
        self.db.add(new_user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race against a concurrent signup with the same email/username
            self.db.rollback()
            raise ConflictError("Email or username already exists")
        self.db.refresh(new_user)

        return {"user": new_user, "token": self._issue(new_user)}

    def sign_in(self, data: SignInRequest) -> dict:
        logging.debug(f"Signing in user: {data.email}")
        user = self.validate_user(data.email, data.password)
        if user is None:
            raise UnauthorizedError("Invalid credentials")
        return {"user": user, "token": self._issue(user)}

    def validate_user(self, email: str, password: str) -> User | None:
        user = self.db.query(User).filter(User.email == email).first()
        if user and self.credentials.verify_password(password, user.password):
            return user
        return None

    def sign_out(self, user_id: int) -> dict:
        return self.sessions.sign_out(user_id)

    def _issue(self, user: User) -> str:
        token, token_id = self.credentials.issue_token(user.id, user.email)
        self.sessions.open(user.id, token_id)
        self.db.refresh(user)
        return token
