"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from ..config import get_settings


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed access token carrying ``data`` and an expiry."""
    settings = get_settings()
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.access_token_expire_minutes
        )

    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.access_token_secret, algorithm=settings.algorithm)


def create_user_token(user_id: UUID) -> str:
    """Issue an access token whose only identity claim is the user id."""
    return create_access_token({"sub": str(user_id)})


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode and validate access token.

    Returns None for malformed, tampered or expired tokens.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.access_token_secret, algorithms=[settings.algorithm])
    except JWTError:
        return None

    if payload.get("type") != "access":
        return None

    return payload


def get_user_id_from_token(token: str) -> Optional[UUID]:
    """Extract user ID from token."""
    payload = decode_access_token(token)
    if not payload:
        return None

    user_id = payload.get("sub")
    if not user_id:
        return None

    try:
        return UUID(user_id)
    except (TypeError, ValueError):
        return None
