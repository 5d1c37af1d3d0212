"""Domain exceptions raised by repositories and services.

Each exception carries the HTTP status it maps to, so the API layer can
translate any :class:`SpaceMateError` with a single handler (see
``spacemate.main``).
"""

from fastapi import status


class SpaceMateError(Exception):
    """Base class for all domain errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(SpaceMateError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ValidationError(SpaceMateError):
    """Missing or malformed input detected by a service."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InvalidDateRangeError(ValidationError):
    default_message = "check_out must be after check_in"


class CapacityExceededError(ValidationError):
    default_message = "Number of guests exceeds the property's capacity"


class ForbiddenError(SpaceMateError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not allowed"


class UnauthorizedError(SpaceMateError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Could not validate credentials"
