"""Lesson model: the central booking record."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from drivedesk.app.core.enums import LessonStatus
from drivedesk.app.core.time import utc_now
from drivedesk.app.db.base_class import Base
from drivedesk.app.db.types import UTCDateTime


class Lesson(Base):
    __tablename__ = "lessons"

    id = Column(Integer, primary_key=True, index=True)
    candidate_id = Column(Integer, nullable=False, index=True)
    instructor_id = Column(Integer, nullable=False, index=True)
    # Date label as supplied by the caller; compared by string equality.
    date = Column(String(32), nullable=False, index=True)
    time = Column(String(16), nullable=False)
    lesson_type = Column(String(100), nullable=False)
    pickup_location = Column(String(255), nullable=False)
    status = Column(String(20), nullable=False, default=LessonStatus.BOOKED.value, index=True)
    price = Column(Integer, nullable=False)
    invoice_id = Column(Integer, ForeignKey("invoices.id"), nullable=True, index=True)
    created_at = Column(UTCDateTime, nullable=False, default=utc_now)

    feedback = relationship("Feedback", order_by="Feedback.id")
