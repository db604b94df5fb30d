"""
Domain exceptions for DriveDesk.

Services raise these; the API layer renders them as ``{"error": message}``
with the status code carried by the exception class.
"""

from fastapi import status


class DomainError(Exception):
    """Base exception for all domain errors."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(DomainError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"


class InvalidCredentials(Unauthenticated):
    default_message = "Invalid credentials"


class MissingCredential(Unauthenticated):
    default_message = "Missing Authorization header"


class MalformedCredential(Unauthenticated):
    default_message = "Invalid token"


class Forbidden(DomainError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class ForbiddenRole(Forbidden):
    default_message = "Forbidden: insufficient role"


class NotOwner(Forbidden):
    default_message = "You can only update your own lessons"


class NotFound(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InstructorNotFound(NotFound):
    default_message = "Instructor not found"


class LessonNotFound(NotFound):
    default_message = "Lesson not found"


class CandidateNotFound(NotFound):
    default_message = "Candidate not found"


class InvalidRequest(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class SlotNotOffered(InvalidRequest):
    default_message = "Time not in instructor working slots"


class SlotAlreadyBooked(InvalidRequest):
    default_message = "Slot already booked"


class NothingToInvoice(InvalidRequest):
    default_message = "No completed lessons to invoice"
