"""Instructor listing and availability endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from drivedesk.app.core.directory import Directory, get_directory
from drivedesk.app.core.principal import Principal
from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import get_current_principal
from drivedesk.app.schemas.instructor import AvailabilityRead, InstructorRead
from drivedesk.app.services.availability import get_available_slots

router = APIRouter(prefix="/api", tags=["instructors"])


@router.get("/instructors", response_model=List[InstructorRead])
async def list_instructors(
    directory: Directory = Depends(get_directory),
    current_principal: Principal = Depends(get_current_principal),
):
    return [
        InstructorRead(
            id=profile.id,
            name=directory.display_name(profile.id),
            vehicle_type=profile.vehicle_type,
            slots=list(profile.slots),
        )
        for profile in directory.list_instructors()
    ]


@router.get("/availability", response_model=AvailabilityRead)
async def read_availability(
    instructor_id: int = Query(alias="instructorId"),
    date: str = Query(),
    db: Session = Depends(get_db),
    directory: Directory = Depends(get_directory),
    current_principal: Principal = Depends(get_current_principal),
):
    slots = get_available_slots(db, directory, instructor_id, date)
    return AvailabilityRead(instructor_id=instructor_id, date=date, available_slots=slots)
