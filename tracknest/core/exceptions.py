# ============================================================================
# FILE: tracknest/core/exceptions.py
# ============================================================================
from fastapi import HTTPException, status


class TrackNestError(HTTPException):
    """Base class for errors surfaced to API callers as {"message": ...}"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error. Please try again later."

    def __init__(self, message: str = None, headers: dict = None):
        super().__init__(
            status_code=self.status_code,
            detail=message or self.default_message,
            headers=headers,
        )

    @property
    def message(self) -> str:
        return self.detail


class BadRequest(TrackNestError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class Unauthorized(TrackNestError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "No token, authorization denied."


class InvalidCredentials(TrackNestError):
    """Login and password-change failures; never says which part was wrong"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid email or password."


class Conflict(TrackNestError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists."


class NotFound(TrackNestError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class ServerError(TrackNestError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
