"""Lesson schemas."""

from typing import Optional

from drivedesk.app.schemas.base import CamelModel


class LessonCreate(CamelModel):
    instructor_id: int
    date: str
    time: str
    lesson_type: Optional[str] = None
    pickup_location: Optional[str] = None


class LessonRead(CamelModel):
    id: int
    candidate_id: int
    instructor_id: int
    date: str
    time: str
    lesson_type: str
    pickup_location: str
    status: str
    price: int
    invoice_id: Optional[int] = None


class LessonListItem(LessonRead):
    """Lesson enriched with display names for listings."""

    candidate_name: str
    instructor_name: str
