"""Authentication service implementation."""

from typing import Optional, Union
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...security import create_user_token, hash_password, verify_password
from ..logging import get_logger
from ..repositories.user_repository import UserRepository
from ..schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserProfileResponse,
    UserResponse,
)
from ..schemas.common import MessageResponse
from .interfaces import IAuthService

logger = get_logger("auth")

USER_EXISTS = "User already exists"


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)

    async def register_user(
        self, request: RegisterRequest
    ) -> Union[RegisterResponse, MessageResponse]:
        """Register new user.

        A duplicate email is not an HTTP error: the caller gets a 200 with
        ``error: true`` and no second record is created.
        """
        if await self.user_repo.is_email_taken(request.email):
            logger.info("Registration rejected, email already registered")
            return MessageResponse(error=True, message=USER_EXISTS)

        user_data = {
            "full_name": request.full_name,
            "email": request.email,
            "password_hash": hash_password(request.password),
        }

        try:
            user = await self.user_repo.create_user(user_data)
        except IntegrityError:
            # lost a race against a concurrent registration of the same email
            await self.session.rollback()
            logger.info("Registration rejected by unique constraint on email")
            return MessageResponse(error=True, message=USER_EXISTS)

        logger.info("User registered", extra={"user_id": str(user.id)})

        return RegisterResponse(
            user=UserResponse.model_validate(user),
            access_token=create_user_token(user.id),
        )

    async def authenticate_user(self, request: LoginRequest) -> LoginResponse:
        """Login user and return an access token."""
        user = await self.user_repo.get_by_email(request.email)
        if not user or not verify_password(request.password, user.password_hash):
            logger.info("Login failed")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials"
            )

        logger.info("User logged in", extra={"user_id": str(user.id)})

        return LoginResponse(email=user.email, access_token=create_user_token(user.id))

    async def get_current_user(self, user_id: UUID) -> Optional[UserProfileResponse]:
        """Get user profile by ID, or None if the account no longer exists."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            return None

        return UserProfileResponse(user=UserResponse.model_validate(user))
