import logging
import uuid
from dataclasses import dataclass
from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from blog_api.config import settings
from blog_api.core.exceptions import UnauthorizedError

# Use argon2 instead of bcrypt to avoid 72-byte password limitation
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


@dataclass(frozen=True)
class TokenIdentity:
    id: int
    email: str


class CredentialService:
    """Password hashing and bearer token issuance/verification.

    Tokens are HS256 JWTs carrying ``{id, email, jti}``. The ``jti`` claim is
    returned to callers so a session row can be recorded for the token.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256",
                 expires_delta: timedelta | None = None):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta or timedelta(hours=24)

    # Password hashing

    def hash_password(self, password: str) -> str:
        return pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(plain_password, hashed_password)

    # JWT tokens

    def issue_token(self, user_id: int, email: str) -> tuple[str, str]:
        token_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)
        to_encode = {
            "id": user_id,
            "email": email,
            "jti": token_id,
            "iat": now,
            "exp": now + self.expires_delta,
        }
        encoded_jwt = jwt.encode(
            to_encode, self.secret_key, algorithm=self.algorithm)
        return encoded_jwt, token_id

    def verify_token(self, token: str) -> TokenIdentity:
        try:
            payload = jwt.decode(
                token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            logging.debug(f"Rejected bearer token: {exc}")
            raise UnauthorizedError("Invalid or expired token") from exc

        user_id = payload.get("id")
        email = payload.get("email")
        # bool is an int subclass
        if type(user_id) is not int or not isinstance(email, str):
            raise UnauthorizedError("Invalid or expired token")
        return TokenIdentity(id=user_id, email=email)


def get_credential_service() -> CredentialService:
    return CredentialService(
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
