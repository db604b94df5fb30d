"""Closed value sets shared by models, schemas and access checks."""

from enum import StrEnum


class Role(StrEnum):
    """Account roles."""

    CANDIDATE = "CANDIDATE"
    INSTRUCTOR = "INSTRUCTOR"
    ADMIN = "ADMIN"


class LessonStatus(StrEnum):
    """Lesson lifecycle status."""

    BOOKED = "BOOKED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class InvoiceStatus(StrEnum):
    DRAFT = "DRAFT"
