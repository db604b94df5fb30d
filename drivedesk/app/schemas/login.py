"""Login request and response schemas."""

from pydantic import BaseModel, EmailStr

from drivedesk.app.schemas.user import UserRead


class LoginRequest(BaseModel):
    """Payload for login attempts."""

    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    token: str
    user: UserRead
