"""Fixed account and instructor directory.

The directory is read-only configuration built once from seed data and handed
to the services through the ``get_directory`` dependency, so tests can swap in
their own accounts with ``app.dependency_overrides``.
"""

from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from drivedesk.app.core.enums import Role
from drivedesk.app.core.security import get_password_hash, verify_password


class Account(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    role: Role
    email: str
    name: str
    phone: str
    hashed_password: str


class InstructorProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    vehicle_type: str
    slots: tuple[str, ...]


class AccountSeed(BaseModel):
    id: int
    role: Role
    email: str
    name: str
    phone: str
    password: str


class Directory:
    def __init__(self, accounts: Iterable[Account], instructors: Iterable[InstructorProfile]):
        self._accounts = {account.id: account for account in accounts}
        self._instructors = {profile.id: profile for profile in instructors}
        for profile in self._instructors.values():
            account = self._accounts.get(profile.id)
            if account is None or account.role != Role.INSTRUCTOR:
                raise ValueError(f"Instructor profile {profile.id} has no instructor account")

    @classmethod
    def from_seed(cls, accounts: Iterable[AccountSeed], instructors: Iterable[InstructorProfile]) -> "Directory":
        built = [
            Account(
                id=seed.id,
                role=seed.role,
                email=seed.email,
                name=seed.name,
                phone=seed.phone,
                hashed_password=get_password_hash(seed.password),
            )
            for seed in accounts
        ]
        return cls(built, instructors)

    def authenticate(self, email: str, password: str) -> Optional[Account]:
        for account in self._accounts.values():
            if account.email == email:
                return account if verify_password(password, account.hashed_password) else None
        return None

    def get_account(self, account_id: int) -> Optional[Account]:
        return self._accounts.get(account_id)

    def get_candidate(self, account_id: int) -> Optional[Account]:
        account = self._accounts.get(account_id)
        if account is None or account.role != Role.CANDIDATE:
            return None
        return account

    def get_instructor(self, instructor_id: int) -> Optional[InstructorProfile]:
        return self._instructors.get(instructor_id)

    def list_instructors(self) -> list[InstructorProfile]:
        return sorted(self._instructors.values(), key=lambda profile: profile.id)

    def display_name(self, account_id: int) -> str:
        account = self._accounts.get(account_id)
        return account.name if account else "Unknown"


DEFAULT_PASSWORD = "password"

DEFAULT_ACCOUNTS = [
    AccountSeed(
        id=1,
        role=Role.CANDIDATE,
        email="candidate1@example.com",
        password=DEFAULT_PASSWORD,
        name="Alice Candidate",
        phone="1234567890",
    ),
    AccountSeed(
        id=2,
        role=Role.INSTRUCTOR,
        email="instructor1@example.com",
        password=DEFAULT_PASSWORD,
        name="Ian Instructor",
        phone="2222222222",
    ),
    AccountSeed(
        id=3,
        role=Role.ADMIN,
        email="admin1@example.com",
        password=DEFAULT_PASSWORD,
        name="Adam Admin",
        phone="3333333333",
    ),
]

DEFAULT_INSTRUCTORS = [
    InstructorProfile(id=2, vehicle_type="manual", slots=("09:00", "11:00", "14:00", "16:00")),
]


_directory_instance = None


def get_directory() -> Directory:
    """Return the singleton directory built from the default seed."""
    global _directory_instance
    if _directory_instance is None:
        _directory_instance = Directory.from_seed(DEFAULT_ACCOUNTS, DEFAULT_INSTRUCTORS)
    return _directory_instance
