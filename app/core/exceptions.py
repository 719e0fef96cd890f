"""
Domain exceptions.

Services raise these instead of HTTP errors so they can be called
outside a request.  ``app.main`` maps every :class:`AppError` to a JSON
response using its ``status_code``.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that are reported to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """A required scalar is missing or a collection is malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """The target does not exist, or exists under another profile.

    Both cases produce the same error so that the existence of other
    profiles' data is never revealed.
    """

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """The request collides with existing state."""

    status_code = status.HTTP_409_CONFLICT


class InvalidSessionStateError(AppError):
    """A training session cannot make the requested move from its current status."""

    status_code = status.HTTP_409_CONFLICT
