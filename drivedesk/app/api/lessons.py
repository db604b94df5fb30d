"""Lesson endpoints: booking, listing, completion and feedback."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from drivedesk.app.core.directory import Directory, get_directory
from drivedesk.app.core.principal import Principal
from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_principal, require_candidate, require_instructor
from drivedesk.app.schemas.feedback import FeedbackCreate, FeedbackResult
from drivedesk.app.schemas.lesson import LessonCreate, LessonListItem, LessonRead
from drivedesk.app.services.feedback import submit_feedback
from drivedesk.app.services.lessons import book_lesson, complete_lesson, list_lessons

router = APIRouter(prefix="/api/lessons", tags=["lessons"])


@router.post("", response_model=LessonRead, status_code=status.HTTP_201_CREATED)
async def create_lesson(
    lesson_in: LessonCreate,
    db: Session = Depends(get_db),
    directory: Directory = Depends(get_directory),
    current_candidate: Principal = Depends(require_candidate),
):
    return book_lesson(db, directory, current_candidate.id, lesson_in)


@router.get("", response_model=List[LessonListItem])
async def read_lessons(
    date: Optional[str] = None,
    instructor_id: Optional[int] = Query(default=None, alias="instructorId"),
    status: Optional[str] = None,
    db: Session = Depends(get_db),
    directory: Directory = Depends(get_directory),
    current_principal: Principal = Depends(get_current_principal),
):
    return list_lessons(db, directory, current_principal, date=date, instructor_id=instructor_id, status=status)


@router.post("/{lesson_id}/complete", response_model=LessonRead)
async def mark_lesson_completed(
    lesson_id: int,
    db: Session = Depends(get_db),
    current_instructor: Principal = Depends(require_instructor),
):
    return complete_lesson(db, current_instructor.id, lesson_id)


@router.post("/{lesson_id}/feedback", response_model=FeedbackResult, status_code=status.HTTP_201_CREATED)
async def create_feedback(
    lesson_id: int,
    feedback_in: Optional[FeedbackCreate] = None,
    db: Session = Depends(get_db),
    current_instructor: Principal = Depends(require_instructor),
):
    lesson, feedback = submit_feedback(db, current_instructor.id, lesson_id, feedback_in or FeedbackCreate())
    return {"lesson": lesson, "feedback": feedback}
