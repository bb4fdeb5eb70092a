import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from blog_api.routes import auth, post, comment
from blog_api.config import settings
from blog_api.core.exceptions import (
    BlogAPIError,
    InvalidInputError,
    ConflictError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    InternalError,
)
import blog_api.models  # noqa: F401  registers all mappers

logging.basicConfig(level=settings.LOG_LEVEL)

EXCEPTION_MAPPING = {
    InvalidInputError: 400,
    UnauthorizedError: 401,
    ForbiddenError: 403,
    NotFoundError: 404,
    ConflictError: 409,
    InternalError: 500,
}


def blog_error_handler(request: Request, exc: BlogAPIError):
    """Translate a service error into its HTTP status."""
    status_code = EXCEPTION_MAPPING.get(type(exc), 500)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content={"detail": exc.detail}, headers=headers)


def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed input as a 400 with one message per offending field."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg')}")
    return blog_error_handler(request, InvalidInputError(messages))


app = FastAPI(
    title=settings.APP_NAME,
    description="The Community Blog API description",
    version="1.0",
    docs_url="/api",
)

# Use configured origins (reads from blog_api.config.settings)
origins = settings.ALLOWED_ORIGINS

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.add_exception_handler(BlogAPIError, blog_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

app.include_router(auth.router, prefix="/auth", tags=["auth"])
app.include_router(post.router)
app.include_router(comment.router)


@app.get("/")
async def read_root():
    return {"message": f"{settings.APP_NAME} is running"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
