"""Lesson ledger: booking, role-scoped listing and completion."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from drivedesk.app.core.directory import Directory
from drivedesk.app.core.enums import LessonStatus, Role
from drivedesk.app.core.exceptions import (
    InstructorNotFound,
    LessonNotFound,
    NotOwner,
    SlotAlreadyBooked,
    SlotNotOffered,
)
from drivedesk.app.core.principal import Principal
from drivedesk.app.core.settings import get_settings
from drivedesk.app.db.session import store_lock
from drivedesk.app.models.lesson import Lesson
from drivedesk.app.schemas.lesson import LessonCreate, LessonListItem, LessonRead

logger = logging.getLogger(__name__)


def find_clash(db: Session, instructor_id: int, date: str, time: str) -> Optional[Lesson]:
    return (
        db.query(Lesson)
        .filter(
            Lesson.instructor_id == instructor_id,
            Lesson.date == date,
            Lesson.time == time,
            Lesson.status != LessonStatus.CANCELLED.value,
        )
        .first()
    )


def book_lesson(db: Session, directory: Directory, candidate_id: int, lesson_in: LessonCreate) -> Lesson:
    settings = get_settings()
    profile = directory.get_instructor(lesson_in.instructor_id)
    if profile is None:
        raise InstructorNotFound()
    if lesson_in.time not in profile.slots:
        raise SlotNotOffered()

    with store_lock:
        if find_clash(db, lesson_in.instructor_id, lesson_in.date, lesson_in.time) is not None:
            logger.warning(
                "Rejected booking: instructor %s already booked on %s at %s",
                lesson_in.instructor_id,
                lesson_in.date,
                lesson_in.time,
            )
            raise SlotAlreadyBooked()
        lesson = Lesson(
            candidate_id=candidate_id,
            instructor_id=lesson_in.instructor_id,
            date=lesson_in.date,
            time=lesson_in.time,
            lesson_type=lesson_in.lesson_type or settings.default_lesson_type,
            pickup_location=lesson_in.pickup_location or settings.default_pickup_location,
            status=LessonStatus.BOOKED.value,
            price=settings.lesson_price,
        )
        try:
            db.add(lesson)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(lesson)

    logger.info(
        "Lesson %s booked by candidate %s with instructor %s on %s at %s",
        lesson.id,
        candidate_id,
        lesson.instructor_id,
        lesson.date,
        lesson.time,
    )
    return lesson


def list_lessons(
    db: Session,
    directory: Directory,
    principal: Principal,
    date: Optional[str] = None,
    instructor_id: Optional[int] = None,
    status: Optional[str] = None,
) -> List[LessonListItem]:
    query = db.query(Lesson)
    if principal.role == Role.CANDIDATE:
        query = query.filter(Lesson.candidate_id == principal.id)
    elif principal.role == Role.INSTRUCTOR:
        query = query.filter(Lesson.instructor_id == principal.id)
    elif instructor_id is not None:
        # Only admins may pick an instructor; other roles are already scoped.
        query = query.filter(Lesson.instructor_id == instructor_id)

    if date:
        query = query.filter(Lesson.date == date)
    if status:
        query = query.filter(Lesson.status == status)

    lessons = query.order_by(Lesson.id.asc()).all()
    return [enrich_lesson(lesson, directory) for lesson in lessons]


def enrich_lesson(lesson: Lesson, directory: Directory) -> LessonListItem:
    data = LessonRead.model_validate(lesson).model_dump()
    data["candidate_name"] = directory.display_name(lesson.candidate_id)
    data["instructor_name"] = directory.display_name(lesson.instructor_id)
    return LessonListItem(**data)


def get_owned_lesson(db: Session, lesson_id: int, instructor_id: int, not_owner_message: str | None = None) -> Lesson:
    lesson = db.query(Lesson).filter(Lesson.id == lesson_id).first()
    if lesson is None:
        raise LessonNotFound()
    if lesson.instructor_id != instructor_id:
        raise NotOwner(not_owner_message)
    return lesson


def complete_lesson(db: Session, instructor_id: int, lesson_id: int) -> Lesson:
    with store_lock:
        lesson = get_owned_lesson(db, lesson_id, instructor_id)
        # No prior-state check: any lesson the instructor owns can be completed again.
        try:
            lesson.status = LessonStatus.COMPLETED.value
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(lesson)
    logger.info("Lesson %s marked completed by instructor %s", lesson.id, instructor_id)
    return lesson
