"""Authentication dependencies: bearer token parsing and role capability checks."""

from typing import Callable

from fastapi import Depends, Header

from drivedesk.app.core.directory import Account, Directory, get_directory
from drivedesk.app.core.enums import Role
from drivedesk.app.core.exceptions import ForbiddenRole, MalformedCredential, MissingCredential
from drivedesk.app.core.principal import Principal
from drivedesk.app.core.security import decode_access_token


def get_current_principal(authorization: str | None = Header(default=None)) -> Principal:
    # Expect Authorization: Bearer <token>
    if not authorization:
        raise MissingCredential()
    if not authorization.startswith("Bearer "):
        raise MalformedCredential("Invalid Authorization header")
    token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise MalformedCredential("Invalid Authorization header")
    try:
        # Decode and validate JWT; signature and expiry are checked here
        payload = decode_access_token(token)
    except ValueError:
        raise MalformedCredential()

    try:
        return Principal(
            id=int(payload["sub"]),
            email=payload["email"],
            role=payload["role"],
            name=payload["name"],
        )
    except (KeyError, TypeError, ValueError):
        raise MalformedCredential()


def get_current_account(
    principal: Principal = Depends(get_current_principal),
    directory: Directory = Depends(get_directory),
) -> Account:
    account = directory.get_account(principal.id)
    if account is None:
        raise MalformedCredential("Unknown account")
    return account


def require_role(role: Role) -> Callable[..., Principal]:
    """Build a dependency that admits only callers holding ``role``."""

    def check_role(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not principal.has_role(role):
            raise ForbiddenRole()
        return principal

    return check_role


require_candidate = require_role(Role.CANDIDATE)
require_instructor = require_role(Role.INSTRUCTOR)
require_admin = require_role(Role.ADMIN)
