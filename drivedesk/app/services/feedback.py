"""Feedback recorder: rates a lesson and closes it out."""

import logging
from typing import List, Tuple

from sqlalchemy.orm import Session

from drivedesk.app.core.enums import LessonStatus
from drivedesk.app.db.session import store_lock
from drivedesk.app.models.feedback import Feedback
from drivedesk.app.models.lesson import Lesson
from drivedesk.app.schemas.feedback import FeedbackCreate
from drivedesk.app.services.lessons import get_owned_lesson

logger = logging.getLogger(__name__)

DEFAULT_RATING = 5


def submit_feedback(
    db: Session, instructor_id: int, lesson_id: int, feedback_in: FeedbackCreate
) -> Tuple[Lesson, Feedback]:
    """Store feedback for a lesson the instructor teaches and mark it completed.

    Several submissions for the same lesson are all kept. The rating is not
    range-checked.
    """
    with store_lock:
        lesson = get_owned_lesson(
            db, lesson_id, instructor_id, not_owner_message="You can only give feedback for your own lessons"
        )
        feedback = Feedback(
            lesson_id=lesson.id,
            instructor_id=instructor_id,
            rating=feedback_in.rating if feedback_in.rating is not None else DEFAULT_RATING,
            comments=feedback_in.comments or "",
        )
        try:
            db.add(feedback)
            lesson.status = LessonStatus.COMPLETED.value
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(lesson)
        db.refresh(feedback)

    logger.info("Feedback %s recorded for lesson %s (rating %s)", feedback.id, lesson.id, feedback.rating)
    return lesson, feedback


def list_feedback_for_lesson(db: Session, lesson_id: int) -> List[Feedback]:
    lesson = db.get(Lesson, lesson_id)
    if lesson is None:
        return []
    db.refresh(lesson, attribute_names=["feedback"])
    return list(lesson.feedback)
