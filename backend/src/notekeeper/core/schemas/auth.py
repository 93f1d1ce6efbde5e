"""
Account and authentication schemas.

These schemas define the API contracts for registration, login and the
current-user profile.
"""

import uuid
from datetime import datetime

from pydantic import ConfigDict, Field

from .common import CamelModel, RequestModel


class RegisterRequest(RequestModel):
    """Account creation request schema."""

    full_name: str = Field(min_length=1, description="Full name")
    email: str = Field(min_length=1, description="Login email, must be unique")
    password: str = Field(min_length=1, description="Account password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "fullName": "Ada Lovelace",
                "email": "ada@example.com",
                "password": "analytical-engine",
            }
        }
    )


class LoginRequest(RequestModel):
    """Login request schema."""

    email: str = Field(min_length=1, description="Account email")
    password: str = Field(min_length=1, description="Account password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "ada@example.com", "password": "analytical-engine"}
        }
    )


class UserResponse(CamelModel):
    """Public user profile; the password hash is never exposed."""

    id: uuid.UUID = Field(description="User unique identifier")
    full_name: str = Field(description="Full name")
    email: str = Field(description="Account email")
    created_on: datetime = Field(description="Account creation timestamp")

    model_config = ConfigDict(from_attributes=True)


class RegisterResponse(CamelModel):
    """Successful registration: the new user plus an access token."""

    error: bool = False
    user: UserResponse
    access_token: str = Field(description="JWT access token")
    message: str = "Registration successful"


class LoginResponse(CamelModel):
    """Successful login."""

    error: bool = False
    message: str = "Login Successful"
    email: str
    access_token: str = Field(description="JWT access token")


class UserProfileResponse(CamelModel):
    """Current user profile envelope."""

    user: UserResponse
    message: str = ""
