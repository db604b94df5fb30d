"""Feedback schemas."""

from typing import Optional

from drivedesk.app.schemas.base import CamelModel
from drivedesk.app.schemas.lesson import LessonRead


class FeedbackCreate(CamelModel):
    rating: Optional[int] = None
    comments: Optional[str] = None


class FeedbackRead(CamelModel):
    id: int
    lesson_id: int
    instructor_id: int
    rating: int
    comments: str


class FeedbackResult(CamelModel):
    lesson: LessonRead
    feedback: FeedbackRead
