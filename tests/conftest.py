import pytest

from drivedesk.app.core.directory import AccountSeed, Directory, InstructorProfile, get_directory
from drivedesk.app.core.enums import Role
from drivedesk.app.main import app

# Two candidates and two instructors so scoping can be checked across owners.
FIXTURE_DIRECTORY = Directory.from_seed(
    [
        AccountSeed(id=1, role=Role.CANDIDATE, email="candidate1@example.com", password="password", name="Alice Candidate", phone="1234567890"),
        AccountSeed(id=2, role=Role.INSTRUCTOR, email="instructor1@example.com", password="password", name="Ian Instructor", phone="2222222222"),
        AccountSeed(id=3, role=Role.ADMIN, email="admin1@example.com", password="password", name="Adam Admin", phone="3333333333"),
        AccountSeed(id=4, role=Role.CANDIDATE, email="candidate2@example.com", password="password", name="Bob Candidate", phone="4444444444"),
        AccountSeed(id=5, role=Role.INSTRUCTOR, email="instructor2@example.com", password="password", name="Ivy Instructor", phone="5555555555"),
    ],
    [
        InstructorProfile(id=2, vehicle_type="manual", slots=("09:00", "11:00", "14:00", "16:00")),
        InstructorProfile(id=5, vehicle_type="automatic", slots=("08:00", "10:00", "12:00")),
    ],
)


@pytest.fixture
def directory():
    """Swap the default directory for the two-candidate, two-instructor fixture."""
    app.dependency_overrides[get_directory] = lambda: FIXTURE_DIRECTORY
    yield FIXTURE_DIRECTORY
    app.dependency_overrides.pop(get_directory, None)
