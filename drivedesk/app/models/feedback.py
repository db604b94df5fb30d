"""Instructor feedback attached to a lesson."""

from sqlalchemy import Column, ForeignKey, Integer, Text

from drivedesk.app.core.time import utc_now
from drivedesk.app.db.base_class import Base
from drivedesk.app.db.types import UTCDateTime


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, index=True)
    lesson_id = Column(Integer, ForeignKey("lessons.id"), nullable=False, index=True)
    instructor_id = Column(Integer, nullable=False, index=True)
    rating = Column(Integer, nullable=False, default=5)
    comments = Column(Text, nullable=False, default="")
    created_at = Column(UTCDateTime, nullable=False, default=utc_now)
