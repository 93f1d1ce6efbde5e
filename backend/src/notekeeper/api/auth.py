"""Account and authentication endpoints."""

from typing import Union
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserProfileResponse,
)
from ..core.schemas.common import ErrorResponse, MessageResponse
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(
    tags=["authentication"],
    responses={400: {"model": ErrorResponse, "description": "Invalid request or credentials"}},
)


@router.post("/create-account", response_model=Union[RegisterResponse, MessageResponse])
async def create_account(request: RegisterRequest, session: AsyncSession = Depends(get_db_session)):
    """Register a new user and return an access token."""
    auth_service = AuthService(session)
    return await auth_service.register_user(request)


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, session: AsyncSession = Depends(get_db_session)):
    """Login with email and password."""
    auth_service = AuthService(session)
    return await auth_service.authenticate_user(request)


@router.get(
    "/get-user",
    response_model=UserProfileResponse,
    responses={
        401: {"description": "Missing bearer token or unknown account"},
        403: {"model": ErrorResponse, "description": "Invalid or expired token"},
    },
)
async def get_user(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get current user profile."""
    auth_service = AuthService(session)
    profile = await auth_service.get_current_user(current_user_id)
    if profile is None:
        # token is valid but the account is gone
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)
    return profile
