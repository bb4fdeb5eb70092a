import logging
from datetime import datetime, timezone
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from blog_api.core.exceptions import InternalError
from blog_api.models.session import UserSession


class SessionRegistry:
    """Bookkeeping of issued tokens per user.

    Rows are never consulted to authorize a request: a signed-out token stays
    valid until it expires.
    """

    def __init__(self, db: Session):
        self.db = db

    def open(self, user_id: int, token_id: str) -> UserSession:
        session = UserSession(user_id=user_id, token_id=token_id, active=True)
        self.db.add(session)
        self.db.commit()
        self.db.refresh(session)
        return session

    def sign_out(self, user_id: int) -> dict:
        try:
            deleted = (
                self.db.query(UserSession)
                .filter(UserSession.user_id == user_id, UserSession.active.is_(True))
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError:
            logging.exception(f"Sign-out failed for user {user_id}")
            self.db.rollback()
            raise InternalError("Failed to sign out")

        logging.debug(f"Signed out user {user_id}, removed {deleted} session(s)")
        return {
            "success": True,
            "message": "Successfully signed out",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
