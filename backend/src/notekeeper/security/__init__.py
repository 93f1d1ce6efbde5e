"""Security utilities."""

from .jwt import (
    create_access_token,
    create_user_token,
    decode_access_token,
    get_user_id_from_token,
)
from .password import hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "create_user_token",
    "decode_access_token",
    "get_user_id_from_token",
]
