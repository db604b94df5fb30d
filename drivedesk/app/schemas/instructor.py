"""Instructor listing and availability schemas."""

from typing import List

from drivedesk.app.schemas.base import CamelModel


class InstructorRead(CamelModel):
    id: int
    name: str
    vehicle_type: str
    slots: List[str]


class AvailabilityRead(CamelModel):
    instructor_id: int
    date: str
    available_slots: List[str]
