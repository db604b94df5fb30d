"""Account schemas used for login and profile responses."""

from drivedesk.app.core.enums import Role
from drivedesk.app.schemas.base import CamelModel


class UserRead(CamelModel):
    id: int
    email: str
    role: Role
    name: str


class UserProfileRead(UserRead):
    phone: str
