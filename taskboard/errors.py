class TaskboardError(Exception):
    """Base for errors that map onto an HTTP status with a ``{message}`` body."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaskboardError):
    status_code = 400


class ConflictError(TaskboardError):
    # duplicate email is reported as a plain bad request
    status_code = 400


class AuthError(TaskboardError):
    status_code = 401


class ForbiddenError(TaskboardError):
    status_code = 403


class NotFoundError(TaskboardError):
    status_code = 404
