class ApiError(Exception):
    """Handler-level failure carrying its public error code and HTTP status."""

    code = "SERVER_ERROR"
    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ApiError):
    code = "NOT_FOUND"
    status = 404


class ForbiddenError(ApiError):
    code = "FORBIDDEN"
    status = 403
