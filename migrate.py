import logging

from blog_api.db.session import engine, Base
import blog_api.models  # noqa: F401  registers User, UserSession, Post, Comment


def run_migrations():
    logging.info("Running database migrations...")
    Base.metadata.create_all(bind=engine)
    logging.info("Migrations completed successfully.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_migrations()
