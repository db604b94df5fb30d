"""Availability projection over an instructor's slot menu and the lesson ledger."""

from typing import List

from sqlalchemy.orm import Session

from drivedesk.app.core.directory import Directory
from drivedesk.app.core.enums import LessonStatus
from drivedesk.app.core.exceptions import InstructorNotFound
from drivedesk.app.models.lesson import Lesson


def get_booked_times(db: Session, instructor_id: int, date: str) -> set[str]:
    """Times taken by non-cancelled lessons for the instructor on the date label."""
    rows = (
        db.query(Lesson.time)
        .filter(
            Lesson.instructor_id == instructor_id,
            Lesson.date == date,
            Lesson.status != LessonStatus.CANCELLED.value,
        )
        .all()
    )
    return {row.time for row in rows}


def get_available_slots(db: Session, directory: Directory, instructor_id: int, date: str) -> List[str]:
    profile = directory.get_instructor(instructor_id)
    if profile is None:
        raise InstructorNotFound()
    booked = get_booked_times(db, instructor_id, date)
    return [slot for slot in profile.slots if slot not in booked]
