"""Login and profile endpoints."""

import logging

from fastapi import APIRouter, Depends

from drivedesk.app.core.directory import Account, Directory, get_directory
from drivedesk.app.core.exceptions import InvalidCredentials
from drivedesk.app.core.security import create_access_token
from drivedesk.app.dependencies.auth import get_current_account
from drivedesk.app.schemas.login import LoginRequest, LoginResponse
from drivedesk.app.schemas.user import UserProfileRead, UserRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, directory: Directory = Depends(get_directory)):
    account = directory.authenticate(credentials.email, credentials.password)
    if account is None:
        logger.warning("Failed login for %s", credentials.email)
        raise InvalidCredentials()

    token = create_access_token(account_id=account.id, email=account.email, role=account.role, name=account.name)
    return {"token": token, "user": UserRead.model_validate(account)}


@router.get("/me", response_model=UserProfileRead)
def read_me(current_account: Account = Depends(get_current_account)):
    return current_account
