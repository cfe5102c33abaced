from pydantic import Field

from src.veloria.schemas.base import CamelModel
from src.veloria.schemas.user import UserRead


class LoginRequest(CamelModel):
    # Plain str so a malformed address gets the same 401 as a wrong one
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=100)


class LoginResponse(CamelModel):
    success: bool = True
    token: str
    token_type: str = "bearer"
    user: UserRead
