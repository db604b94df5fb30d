"""Authenticated caller identity decoded from a bearer token."""

from pydantic import BaseModel, ConfigDict

from drivedesk.app.core.enums import Role


class Principal(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    email: str
    role: Role
    name: str

    def has_role(self, role: Role) -> bool:
        return self.role == role
