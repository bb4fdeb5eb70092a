class BlogAPIError(Exception):
    """Base class for errors raised by the blog services."""

    default_detail = "Internal server error"

    def __init__(self, detail=None):
        self.detail = detail if detail is not None else self.default_detail
        super().__init__(self.detail)


class InvalidInputError(BlogAPIError):
    default_detail = "Invalid input"


class ConflictError(BlogAPIError):
    default_detail = "Resource already exists"


class UnauthorizedError(BlogAPIError):
    default_detail = "Unauthorized"


class ForbiddenError(BlogAPIError):
    default_detail = "Forbidden"


class NotFoundError(BlogAPIError):
    default_detail = "Not found"


class InternalError(BlogAPIError):
    pass
