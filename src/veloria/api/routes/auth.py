"""Dashboard authentication endpoints."""

from fastapi import APIRouter, HTTPException, status
from starlette.requests import Request

from src.veloria.api.dependencies import AuthServiceDep, CurrentUser
from src.veloria.core.rate_limit import limiter
from src.veloria.schemas.auth import LoginRequest, LoginResponse
from src.veloria.schemas.user import UserRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        200: {
            "description": "Successful authentication",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "tokenType": "bearer",
                        "user": {
                            "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
                            "name": "Studio Admin",
                            "email": "admin@veloria.in",
                            "role": "admin",
                        },
                    }
                }
            },
        },
        401: {"description": "Invalid credentials"},
    },
)
@limiter.limit("5/minute")
async def login(
    request: Request, login_data: LoginRequest, service: AuthServiceDep
) -> LoginResponse:
    """Exchange email and password for a bearer token and the user profile."""
    result = await service.authenticate(login_data.email, login_data.password)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return result


@router.get("/me", response_model=UserRead)
async def me(current_user: CurrentUser) -> UserRead:
    return UserRead.model_validate(current_user)
